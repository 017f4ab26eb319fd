from __future__ import annotations

"""Synchronous notification of new optimal solutions.

Judges own an :class:`EventChannel` and post to it from inside their critical
section, so a listener never observes state older than the ``judge()`` call
that produced the event.  Listeners are either objects implementing
:class:`OptimalSolutionListener` or plain callables with the same signature.
"""

import logging
from typing import TYPE_CHECKING, Any, Callable, List, Protocol, Sequence, Union, runtime_checkable

if TYPE_CHECKING:  # pragma: no cover
    from .judges.base import SolutionJudge
    from .problem import Trial


logger = logging.getLogger(__name__)


@runtime_checkable
class OptimalSolutionListener(Protocol):
    def found_new_optimal_solution(
        self, judge: "SolutionJudge", solutions: List["Trial"], trial: "Trial"
    ) -> None:
        ...


ListenerLike = Union[OptimalSolutionListener, Callable[[Any, List[Any], Any], None]]


class EventChannel:
    """Ordered fan-out of ``found_new_optimal_solution`` events."""

    def __init__(self) -> None:
        self._listeners: list[ListenerLike] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def add(self, listener: ListenerLike) -> None:
        if not isinstance(listener, OptimalSolutionListener) and not callable(listener):
            raise TypeError(f"not a listener: {listener!r}")
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove(self, listener: ListenerLike) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            pass

    def found_new_optimal_solution(
        self, judge: "SolutionJudge", solutions: Sequence["Trial"], trial: "Trial"
    ) -> None:
        # Listeners get their own copy; the judge's list is never exposed.
        for listener in list(self._listeners):
            snapshot = list(solutions)
            if isinstance(listener, OptimalSolutionListener):
                listener.found_new_optimal_solution(judge, snapshot, trial)
            else:
                listener(judge, snapshot, trial)
        logger.debug(
            "delivered new-optimum event to %d listener(s), %d optimal solution(s)",
            len(self._listeners),
            len(solutions),
        )
