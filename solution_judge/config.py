"""Problem configuration loading.

A configuration is a JSON object with ``variables``, ``objectives`` and
optional ``solver`` and ``tie_tolerance`` sections; see
:data:`solution_judge.constants.DEMO_CONFIG` for the shape.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .constants import DEFAULT_MAX_TRIALS
from .errors import ConfigError
from .expressions import ExpressionObjective
from .judges import JUDGES, SolutionJudge, TiePolicy, WeightedSatisfactionJudge
from .problem import Objective, Problem, Variable
from .solver import RandomSearch, Solver, Stopper

__all__ = ["ProblemConfig", "load_problem_config"]

logger = logging.getLogger(__name__)


@dataclass
class ProblemConfig:
    problem: Problem
    weights: dict[Objective, float] = field(default_factory=dict)
    max_trials: int | None = DEFAULT_MAX_TRIALS
    min_satisfaction: float | None = None
    seed: int | None = None
    tie_tolerance: float | None = None

    def build_judge(self, strategy: str = "weighted") -> SolutionJudge:
        try:
            cls = JUDGES[strategy]
        except KeyError:
            raise ConfigError(f"unknown judging strategy: {strategy!r}") from None
        if cls is WeightedSatisfactionJudge:
            policy = TiePolicy(abs_tol=self.tie_tolerance) if self.tie_tolerance else None
            judge = WeightedSatisfactionJudge(tie_policy=policy)
            for objective, weight in self.weights.items():
                judge.set_weight(objective, weight)
            return judge
        if self.weights or self.tie_tolerance:
            logger.warning(
                "%s strategy ignores configured objective weights and tie_tolerance", strategy
            )
        return cls()

    def build_solver(self, judge: SolutionJudge) -> Solver:
        return Solver(
            self.problem,
            judge,
            algorithm=RandomSearch(seed=self.seed),
            stopper=Stopper(max_trials=self.max_trials, min_satisfaction=self.min_satisfaction),
        )


def _require(obj: Mapping[str, Any], key: str, where: str) -> Any:
    if key not in obj:
        raise ConfigError(f"{where}: missing required key {key!r}")
    return obj[key]


def _number(value: Any, where: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{where}: expected a number, got {value!r}")
    return float(value)


def _parse_variables(raw: Any) -> list[Variable]:
    if not isinstance(raw, list):
        raise ConfigError("'variables' must be a list")
    variables: list[Variable] = []
    seen: set[str] = set()
    for i, item in enumerate(raw):
        where = f"variables[{i}]"
        if not isinstance(item, dict):
            raise ConfigError(f"{where}: expected an object")
        name = str(_require(item, "name", where))
        if name in seen:
            raise ConfigError(f"{where}: duplicate variable name {name!r}")
        seen.add(name)
        lower = _number(_require(item, "lower", where), f"{where}.lower")
        upper = _number(_require(item, "upper", where), f"{where}.upper")
        initial = item.get("initial")
        try:
            variables.append(
                Variable(
                    name=name,
                    lower=lower,
                    upper=upper,
                    initial=None if initial is None else _number(initial, f"{where}.initial"),
                )
            )
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
    return variables


def _parse_objectives(
    raw: Any, variable_names: list[str]
) -> tuple[list[Objective], dict[Objective, float]]:
    if not isinstance(raw, list):
        raise ConfigError("'objectives' must be a list")
    objectives: list[Objective] = []
    weights: dict[Objective, float] = {}
    for i, item in enumerate(raw):
        where = f"objectives[{i}]"
        if not isinstance(item, dict):
            raise ConfigError(f"{where}: expected an object")
        objective = ExpressionObjective(
            name=str(_require(item, "name", where)),
            expression=str(_require(item, "expression", where)),
            variables=variable_names,
        )
        objectives.append(objective)
        if "weight" in item:
            weights[objective] = _number(item["weight"], f"{where}.weight")
    return objectives, weights


def load_problem_config(source: str | Path | Mapping[str, Any]) -> ProblemConfig:
    """Build a :class:`ProblemConfig` from a JSON file path or a mapping."""

    if isinstance(source, Mapping):
        data: Any = dict(source)
    else:
        path = Path(source)
        try:
            data = json.loads(path.read_text("utf-8"))
        except OSError as exc:
            raise ConfigError(f"cannot read {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise ConfigError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a JSON object")

    variables = _parse_variables(data.get("variables", []))
    objectives, weights = _parse_objectives(
        _require(data, "objectives", "configuration"), [v.name for v in variables]
    )

    solver = data.get("solver") or {}
    if not isinstance(solver, dict):
        raise ConfigError("'solver' must be an object")
    max_trials = solver.get("max_trials", DEFAULT_MAX_TRIALS)
    if max_trials is not None and (not isinstance(max_trials, int) or max_trials <= 0):
        raise ConfigError(f"solver.max_trials must be a positive integer, got {max_trials!r}")
    min_satisfaction = solver.get("min_satisfaction")
    if min_satisfaction is not None:
        min_satisfaction = _number(min_satisfaction, "solver.min_satisfaction")
    if max_trials is None and min_satisfaction is None:
        raise ConfigError("solver needs max_trials or min_satisfaction")
    seed = solver.get("seed")
    if seed is not None and not isinstance(seed, int):
        raise ConfigError(f"solver.seed must be an integer, got {seed!r}")

    tie_tolerance = data.get("tie_tolerance")
    if tie_tolerance is not None:
        tie_tolerance = _number(tie_tolerance, "tie_tolerance")
        if tie_tolerance < 0:
            raise ConfigError("tie_tolerance must be non-negative")

    return ProblemConfig(
        problem=Problem(objectives=objectives, variables=variables),
        weights=weights,
        max_trials=max_trials,
        min_satisfaction=min_satisfaction,
        seed=seed,
        tie_tolerance=tie_tolerance,
    )
