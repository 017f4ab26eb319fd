from __future__ import annotations

"""Weighted-mean satisfaction judge.

The overall satisfaction of a trial is the weighted mean of its objectives'
satisfaction.  The judge keeps every trial tied for the best mean seen so far;
a strictly better trial replaces the whole set.
"""

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional

from ..constants import DEFAULT_WEIGHT
from ..errors import InvalidTrial
from ..problem import Objective, Trial
from .base import SolutionJudge


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TiePolicy:
    """How an aggregate is compared against the current best.

    With both tolerances at zero (the default) only a bit-exact match ties.
    Otherwise values within ``math.isclose`` tolerance of the best tie and do
    not move it.
    """

    rel_tol: float = 0.0
    abs_tol: float = 0.0

    def __post_init__(self) -> None:
        if self.rel_tol < 0 or self.abs_tol < 0:
            raise ValueError("tie tolerances must be non-negative")

    @property
    def exact(self) -> bool:
        return self.rel_tol == 0.0 and self.abs_tol == 0.0

    def compare(self, value: float, best: float) -> int:
        """Return 0 for a tie, 1 when ``value`` beats ``best`` and -1 otherwise."""

        if self.exact:
            if value == best:
                return 0
        elif math.isclose(value, best, rel_tol=self.rel_tol, abs_tol=self.abs_tol):
            return 0
        return 1 if value > best else -1


EXACT = TiePolicy()


class WeightedSatisfactionJudge(SolutionJudge):
    """Judge trials by the weighted mean of their objective satisfactions."""

    def __init__(self, tie_policy: Optional[TiePolicy] = None) -> None:
        super().__init__()
        self.tie_policy = tie_policy or EXACT
        self._weights: Dict[Objective, float] = {}

    def reset(self) -> None:
        with self._lock:
            self._clear_optimum()
            self._weights = {}

    def set_weight(self, objective: Objective, weight: float) -> None:
        # No range check: zero or negative weights are the caller's business.
        with self._lock:
            self._weights[objective] = float(weight)

    def get_weight(self, objective: Objective) -> float:
        with self._lock:
            return self._weights.get(objective, DEFAULT_WEIGHT)

    @property
    def weights(self) -> Dict[Objective, float]:
        with self._lock:
            return dict(self._weights)

    def aggregate(self, trial: Trial) -> float:
        """Weighted mean satisfaction of ``trial`` under the current weights."""

        with self._lock:
            weighted_sum = 0.0
            total_weight = 0.0
            for objective, score in self._collect_scores(trial):
                weight = self._weights.get(objective, DEFAULT_WEIGHT)
                total_weight += weight
                weighted_sum += score.satisfaction * weight
            if total_weight == 0.0:
                raise InvalidTrial("objective weights sum to zero", trial)
            return weighted_sum / total_weight

    def judge(self, trial: Trial) -> None:
        with self._lock:
            value = self.aggregate(trial)
            trial.satisfaction = value

            outcome = self.tie_policy.compare(value, self._best_value)
            if outcome == 0:
                if any(t is trial for t in self._optimal_solutions):
                    logger.debug("trial already optimal at %r", value)
                    return
                self._optimal_solutions.append(trial)
                logger.info(
                    "tied optimal satisfaction %r (%d solutions)",
                    value,
                    len(self._optimal_solutions),
                )
                self._notify(trial)
            elif outcome > 0:
                self._best_value = value
                self._optimal_solutions.clear()
                self._optimal_solutions.append(trial)
                logger.info("new optimal satisfaction %r", value)
                self._notify(trial)
            else:
                logger.debug("rejected trial: %r < best %r", value, self._best_value)
