from __future__ import annotations

import pytest

from solution_judge.errors import ConfigError, InvalidTrial
from solution_judge.expressions import ExpressionObjective, compile_expression
from solution_judge.problem import Problem, Variable


def test_expression_objective_scores_trial_point() -> None:
    obj = ExpressionObjective(name="A", expression="1 - (x - 0.3)**2", variables=["x"])
    problem = Problem(objectives=[obj], variables=[Variable("x", 0.0, 1.0)])
    trial = problem.evaluate(problem.new_trial({"x": 0.3}))
    assert trial.get_score(obj).satisfaction == pytest.approx(1.0)


def test_implicit_multiplication() -> None:
    expr, fn = compile_expression("2x + y", ["x", "y"])
    assert fn(1.5, 1.0) == pytest.approx(4.0)
    assert len(expr.free_symbols) == 2


def test_unknown_symbol_is_rejected() -> None:
    with pytest.raises(ConfigError, match="unknown variables: z"):
        ExpressionObjective(name="A", expression="x + z", variables=["x"])


def test_unparseable_expression_is_rejected() -> None:
    with pytest.raises(ConfigError):
        compile_expression("x +* 2", ["x"])


def test_objectives_hash_by_identity() -> None:
    a1 = ExpressionObjective(name="A", expression="x", variables=["x"])
    a2 = ExpressionObjective(name="A", expression="x", variables=["x"])
    assert a1 != a2
    assert len({a1, a2}) == 2


def test_missing_variable_on_trial() -> None:
    obj = ExpressionObjective(name="A", expression="x", variables=["x"])
    problem = Problem(objectives=[obj])
    with pytest.raises(ConfigError, match="'x'"):
        problem.evaluate(problem.new_trial())


@pytest.mark.parametrize(
    "expression, x",
    [
        ("x**0.5", -1.0),
        ("1/x", 0.0),
        ("log(x)", 0.0),
    ],
)
def test_unevaluable_point_raises_invalid_trial(expression: str, x: float) -> None:
    obj = ExpressionObjective(name="A", expression=expression, variables=["x"])
    problem = Problem(objectives=[obj], variables=[Variable("x", -1.0, 1.0)])
    trial = problem.new_trial({"x": x})
    with pytest.raises(InvalidTrial, match="objective 'A'") as exc:
        problem.evaluate(trial)
    assert exc.value.trial is trial
    assert trial.get_score(obj) is None
