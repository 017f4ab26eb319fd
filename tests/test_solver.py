from __future__ import annotations

import logging

import pytest

from solution_judge.config import load_problem_config
from solution_judge.constants import DEMO_CONFIG
from solution_judge.judges import WeightedSatisfactionJudge
from solution_judge.problem import Objective, Problem, Score, Variable
from solution_judge.solver import RandomSearch, Solver, Stopper


def test_random_search_stays_in_bounds_and_is_seeded() -> None:
    problem = Problem(variables=[Variable("x", -1.0, 1.0), Variable("y", 5.0, 6.0)])
    first = RandomSearch(seed=3).propose(problem).trial_point
    search = RandomSearch(seed=3)
    points = [search.propose(problem).trial_point for _ in range(50)]
    assert points[0] == first
    assert all(-1.0 <= p["x"] <= 1.0 and 5.0 <= p["y"] <= 6.0 for p in points)
    search.reset()
    assert search.propose(problem).trial_point == points[0]


def test_stopper_conditions() -> None:
    with pytest.raises(ValueError):
        Stopper()
    stopper = Stopper(max_trials=10, min_satisfaction=0.9)
    assert stopper.should_stop(10, 0.0, False)
    assert stopper.should_stop(3, 0.95, True)
    assert not stopper.should_stop(3, 0.95, False)
    assert not stopper.should_stop(3, 0.5, True)


def test_solve_demo_is_deterministic() -> None:
    def run():
        cfg = load_problem_config(DEMO_CONFIG)
        cfg.max_trials = 60
        return cfg.build_solver(cfg.build_judge()).solve()

    r1, r2 = run(), run()
    assert r1.evaluations == 60
    assert r1.skipped == 0
    assert r1.best_value == r2.best_value
    assert [t.trial_point for t in r1.optimal_solutions] == [t.trial_point for t in r2.optimal_solutions]
    assert all(t.satisfaction == r1.best_value for t in r1.optimal_solutions)
    sats = [e["satisfaction"] for e in r1.events]
    assert sats == sorted(sats)
    assert r1.to_dict()["optimal_solutions"][0]["satisfaction"] == r1.best_value


def test_solve_stops_on_min_satisfaction() -> None:
    cfg = load_problem_config({**DEMO_CONFIG, "solver": {"max_trials": 10_000, "seed": 1, "min_satisfaction": 0.9}})
    result = cfg.build_solver(cfg.build_judge()).solve()
    assert result.best_value >= 0.9
    assert result.evaluations < 10_000


def test_invalid_trials_are_skipped(caplog: pytest.LogCaptureFixture) -> None:
    problem = Problem(objectives=[], variables=[Variable("x", 0.0, 1.0)])
    solver = Solver(problem, WeightedSatisfactionJudge(), stopper=Stopper(max_trials=3))
    with caplog.at_level(logging.WARNING, logger="solution_judge"):
        result = solver.solve()
    assert result.skipped == 3
    assert result.optimal_solutions == []
    assert "skipping invalid trial" in caplog.text


def test_unevaluable_trials_are_skipped(caplog: pytest.LogCaptureFixture) -> None:
    cfg = load_problem_config(
        {
            "variables": [{"name": "x", "lower": -1.0, "upper": -0.5}],
            "objectives": [{"name": "root", "expression": "x**0.5"}],
            "solver": {"max_trials": 5, "seed": 0},
        }
    )
    with caplog.at_level(logging.WARNING, logger="solution_judge"):
        result = cfg.build_solver(cfg.build_judge()).solve()
    assert result.evaluations == 5
    assert result.skipped == 5
    assert result.optimal_solutions == []
    assert "objective 'root'" in caplog.text


def test_scoreboard_is_detached_after_solve() -> None:
    objective = Objective("A")
    problem = Problem(objectives=[objective])
    judge = WeightedSatisfactionJudge()
    solver = Solver(problem, judge, stopper=Stopper(max_trials=1))
    with pytest.raises(NotImplementedError):
        solver.solve()

    trial = problem.new_trial()
    trial.set_score(Score(objective=objective, satisfaction=0.5))
    judge.judge(trial)
    assert judge.get_optimal_solutions() == [trial]
    assert solver.scoreboard.events == []
