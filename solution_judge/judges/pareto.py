from __future__ import annotations

"""Pareto-dominance judge.

Keeps every trial whose per-objective satisfaction vector is not dominated by
another judged trial.  Satisfaction is maximised on every objective.
"""

import logging
from typing import List, Sequence, Tuple

from ..problem import Trial
from .base import SolutionJudge


logger = logging.getLogger(__name__)


def dominates(a: Sequence[float], b: Sequence[float]) -> bool:
    """``a`` is at least as good as ``b`` everywhere and strictly better somewhere."""

    better = False
    for x, y in zip(a, b):
        if x < y:
            return False
        if x > y:
            better = True
    return better


class ParetoFrontJudge(SolutionJudge):
    """Judge trials by Pareto dominance over objective satisfactions.

    ``trial.satisfaction`` is set to the unweighted mean satisfaction and
    ``best_value`` is the highest mean among trials that ever entered the
    front.
    """

    def __init__(self) -> None:
        super().__init__()
        self._vectors: List[Tuple[float, ...]] = []

    @property
    def best_value(self) -> float:
        """Highest mean satisfaction among trials that ever entered the front.

        Front members may have a lower mean than this value.
        """
        with self._lock:
            return self._best_value

    def reset(self) -> None:
        with self._lock:
            self._clear_optimum()
            self._vectors = []

    def judge(self, trial: Trial) -> None:
        with self._lock:
            vector = tuple(float(s.satisfaction) for _, s in self._collect_scores(trial))
            mean = sum(vector) / len(vector)
            trial.satisfaction = mean

            index = next((i for i, t in enumerate(self._optimal_solutions) if t is trial), None)
            if index is not None:
                if self._vectors[index] == vector:
                    logger.debug("trial already on the front")
                    return
                # Scores changed since it joined: judge it afresh.
                del self._optimal_solutions[index]
                del self._vectors[index]
            if any(dominates(member, vector) for member in self._vectors):
                logger.debug("rejected dominated trial %r", vector)
                return

            kept = [
                (t, v) for t, v in zip(self._optimal_solutions, self._vectors) if not dominates(vector, v)
            ]
            dropped = len(self._optimal_solutions) - len(kept)
            self._optimal_solutions = [t for t, _ in kept] + [trial]
            self._vectors = [v for _, v in kept] + [vector]
            if mean > self._best_value:
                self._best_value = mean
            logger.info(
                "trial joined the front (%d members, %d dominated members dropped)",
                len(self._optimal_solutions),
                dropped,
            )
            self._notify(trial)
