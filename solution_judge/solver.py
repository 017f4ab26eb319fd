from __future__ import annotations

"""Minimal search driver feeding trials to a judge.

The solver owns no judging logic: it proposes trial points, lets the problem's
objectives score them and hands each trial to a :class:`SolutionJudge`.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, List, Optional

import numpy as np

from .errors import InvalidTrial
from .judges.base import SolutionJudge
from .problem import Problem, Trial


logger = logging.getLogger(__name__)


class RandomSearch:
    """Stochastic search drawing uniform points inside the variable bounds."""

    name = "random"

    def __init__(self, seed: Optional[int] = None) -> None:
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def reset(self) -> None:
        self._rng = np.random.default_rng(self.seed)

    def propose(self, problem: Problem) -> Trial:
        variables = problem.variables
        lower = np.array([v.lower for v in variables], dtype=float)
        upper = np.array([v.upper for v in variables], dtype=float)
        point = self._rng.uniform(lower, upper) if variables else np.empty(0)
        return problem.new_trial({v.name: float(x) for v, x in zip(variables, point)})


@dataclass
class Stopper:
    """Stop condition checked after every judged trial."""

    max_trials: Optional[int] = None
    min_satisfaction: Optional[float] = None

    def __post_init__(self) -> None:
        if self.max_trials is None and self.min_satisfaction is None:
            raise ValueError("stopper needs max_trials or min_satisfaction")

    def should_stop(self, evaluations: int, best_value: float, has_solution: bool) -> bool:
        if self.max_trials is not None and evaluations >= self.max_trials:
            return True
        if self.min_satisfaction is not None and has_solution and best_value >= self.min_satisfaction:
            return True
        return False


@dataclass(eq=False)
class ScoreBoard:
    """Listener recording when new optimal solutions were found."""

    evaluations: int = 0
    events: List[dict[str, Any]] = field(default_factory=list)

    def found_new_optimal_solution(
        self, judge: SolutionJudge, solutions: List[Trial], trial: Trial
    ) -> None:
        self.events.append(
            {
                "evaluation": self.evaluations,
                "satisfaction": trial.satisfaction,
                "solutions": len(solutions),
            }
        )

    @property
    def new_optimum_count(self) -> int:
        return len(self.events)


@dataclass
class SolveResult:
    best_value: float
    optimal_solutions: List[Trial]
    evaluations: int
    skipped: int
    elapsed: float
    events: List[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "best_value": self.best_value,
            "evaluations": self.evaluations,
            "skipped": self.skipped,
            "elapsed": self.elapsed,
            "optimal_solutions": [t.summary() for t in self.optimal_solutions],
            "events": list(self.events),
        }


class Solver:
    def __init__(
        self,
        problem: Problem,
        judge: SolutionJudge,
        *,
        algorithm: Optional[RandomSearch] = None,
        stopper: Optional[Stopper] = None,
    ) -> None:
        self.problem = problem
        self.judge = judge
        self.algorithm = algorithm or RandomSearch()
        self.stopper = stopper or Stopper(max_trials=100)
        self.scoreboard = ScoreBoard()

    def evaluate(self, trial: Trial) -> bool:
        """Score and judge one trial; return ``False`` if it was invalid."""

        try:
            self.problem.evaluate(trial)
            self.judge.judge(trial)
        except InvalidTrial as exc:
            logger.warning("skipping invalid trial: %s", exc.reason)
            return False
        return True

    def solve(self) -> SolveResult:
        self.scoreboard = ScoreBoard()
        self.judge.add_listener(self.scoreboard)
        start = time.perf_counter()
        skipped = 0
        try:
            while True:
                trial = self.algorithm.propose(self.problem)
                self.scoreboard.evaluations += 1
                if not self.evaluate(trial):
                    skipped += 1
                evaluations = self.scoreboard.evaluations
                if evaluations % 50 == 0:
                    logger.info("%d trials evaluated, best=%r", evaluations, self.judge.best_value)
                solutions = self.judge.get_optimal_solutions()
                if self.stopper.should_stop(evaluations, self.judge.best_value, bool(solutions)):
                    break
        finally:
            self.judge.remove_listener(self.scoreboard)
        elapsed = time.perf_counter() - start
        result = SolveResult(
            best_value=self.judge.best_value,
            optimal_solutions=self.judge.get_optimal_solutions(),
            evaluations=self.scoreboard.evaluations,
            skipped=skipped,
            elapsed=elapsed,
            events=list(self.scoreboard.events),
        )
        logger.info(
            "solve finished: %d evaluations, best=%r, %d optimal solution(s)",
            result.evaluations,
            result.best_value,
            len(result.optimal_solutions),
        )
        return result
