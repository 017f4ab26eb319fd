"""Judging strategies behind the :class:`SolutionJudge` contract."""

from .base import SolutionJudge  # noqa: F401
from .pareto import ParetoFrontJudge, dominates  # noqa: F401
from .weighted import EXACT, TiePolicy, WeightedSatisfactionJudge  # noqa: F401

JUDGES = {
    "weighted": WeightedSatisfactionJudge,
    "pareto": ParetoFrontJudge,
}

__all__ = [
    "SolutionJudge",
    "WeightedSatisfactionJudge",
    "ParetoFrontJudge",
    "TiePolicy",
    "EXACT",
    "dominates",
    "JUDGES",
]
