from __future__ import annotations

import pytest

from solution_judge.problem import Objective, Problem, Score, Variable


def test_variable_bounds_and_starting_value() -> None:
    assert Variable("x", 0.0, 4.0).starting_value == 2.0
    assert Variable("x", 0.0, 4.0, initial=1.0).starting_value == 1.0
    with pytest.raises(ValueError):
        Variable("x", 2.0, 1.0)


def test_new_trial_fills_unspecified_variables() -> None:
    problem = Problem(variables=[Variable("x", 0.0, 2.0), Variable("y", 0.0, 1.0)])
    trial = problem.new_trial({"y": 0.25})
    assert trial.trial_point == {"x": 1.0, "y": 0.25}
    assert trial.problem is problem
    assert trial.satisfaction == 0.0


def test_scores_follow_problem_order() -> None:
    a, b = Objective("A"), Objective("B")
    problem = Problem(objectives=[a, b])
    trial = problem.new_trial()
    trial.set_score(Score(objective=b, satisfaction=0.2))
    assert trial.get_score(a) is None
    trial.set_score(Score(objective=a, satisfaction=0.7))
    assert trial.summary()["scores"] == {"B": 0.2, "A": 0.7}
    assert problem.get_objective("B") is b
    assert problem.get_objective("C") is None
