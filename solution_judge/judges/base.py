from __future__ import annotations

"""Abstract judge contract shared by every judging strategy."""

import threading
from abc import ABC, abstractmethod
from typing import List, Tuple

from ..errors import InvalidTrial
from ..events import EventChannel, ListenerLike
from ..problem import Objective, Score, Trial


class SolutionJudge(ABC):
    """Consumes trials and maintains the set of optimal solutions.

    Every public operation runs under the instance's re-entrant lock, so at
    most one ``judge``/``reset``/configuration call is in progress at a time
    and readers always get a consistent snapshot.  Listeners are notified
    synchronously from inside that critical section.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._events = EventChannel()
        self._best_value = 0.0
        self._optimal_solutions: List[Trial] = []

    # ------------------------------------------------------------------
    # listeners
    def add_listener(self, listener: ListenerLike) -> None:
        with self._lock:
            self._events.add(listener)

    def remove_listener(self, listener: ListenerLike) -> None:
        with self._lock:
            self._events.remove(listener)

    # ------------------------------------------------------------------
    # contract
    @abstractmethod
    def reset(self) -> None:
        """Restore the construction-time judging state."""

    @abstractmethod
    def judge(self, trial: Trial) -> None:
        """Score ``trial``, write its satisfaction and update the optimal set."""

    def get_optimal_solutions(self) -> List[Trial]:
        with self._lock:
            return list(self._optimal_solutions)

    @property
    def best_value(self) -> float:
        """Best overall satisfaction seen so far; never decreases.

        Its relation to the optimal set depends on the strategy: the weighted
        judge keeps only trials tied at this value, the Pareto judge reports
        the highest mean among trials that entered its front.
        """
        with self._lock:
            return self._best_value

    # ------------------------------------------------------------------
    # helpers for subclasses
    def _clear_optimum(self) -> None:
        self._best_value = 0.0
        self._optimal_solutions = []

    def _collect_scores(self, trial: Trial) -> List[Tuple[Objective, Score]]:
        """Return ``(objective, score)`` pairs in problem order.

        Raises :class:`InvalidTrial` before any state is touched when the
        problem has no objectives or a score is missing.
        """

        objectives = trial.problem.objectives
        if not objectives:
            raise InvalidTrial("problem has no objectives", trial)
        pairs: List[Tuple[Objective, Score]] = []
        for objective in objectives:
            score = trial.get_score(objective)
            if score is None:
                raise InvalidTrial(f"missing score for objective {objective.name!r}", trial)
            pairs.append((objective, score))
        return pairs

    def _notify(self, trial: Trial) -> None:
        self._events.found_new_optimal_solution(self, self._optimal_solutions, trial)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(best_value={self._best_value!r}, "
            f"optimal_solutions={len(self._optimal_solutions)})"
        )
