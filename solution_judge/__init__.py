"""Solution judging for multi-objective search.

A search strategy proposes :class:`Trial` objects, the problem's objectives
score them and a :class:`SolutionJudge` decides which trials form the current
optimal set, notifying listeners whenever that set changes.

Typical usage
-------------
>>> judge = WeightedSatisfactionJudge()
>>> judge.set_weight(objective_b, 2.0)
>>> judge.judge(trial)
>>> judge.get_optimal_solutions()
"""
from importlib.metadata import PackageNotFoundError, version as _version

from .errors import ConfigError, InvalidTrial, SolverError
from .events import EventChannel, OptimalSolutionListener
from .expressions import ExpressionObjective
from .judges import ParetoFrontJudge, SolutionJudge, TiePolicy, WeightedSatisfactionJudge
from .problem import Objective, Problem, Score, Trial, Variable
from .solver import RandomSearch, ScoreBoard, SolveResult, Solver, Stopper

__all__ = [
    "Objective",
    "Score",
    "Problem",
    "Trial",
    "Variable",
    "ExpressionObjective",
    "SolutionJudge",
    "WeightedSatisfactionJudge",
    "ParetoFrontJudge",
    "TiePolicy",
    "EventChannel",
    "OptimalSolutionListener",
    "RandomSearch",
    "ScoreBoard",
    "SolveResult",
    "Solver",
    "Stopper",
    "SolverError",
    "InvalidTrial",
    "ConfigError",
    "__version__",
]

try:
    __version__ = _version("solution_judge")
except PackageNotFoundError:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
