"""Command‑line interface: run a random search over a configured problem."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from . import constants as C
from .config import ProblemConfig, load_problem_config
from .errors import SolverError

__all__ = ["main"]


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search a problem and report its optimal solutions")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--config", help="Path to a JSON problem configuration")
    source.add_argument("--demo", action="store_true", help="Run the built-in two-objective demo")
    parser.add_argument(
        "--strategy",
        choices=["weighted", "pareto"],
        default="weighted",
        help="Judging strategy (default: weighted)",
    )
    parser.add_argument("--max-trials", type=int, help="Override solver.max_trials")
    parser.add_argument("--seed", type=int, help="Override solver.seed")
    parser.add_argument("--out", help="Write the JSON summary to file")
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging level for solution_judge",
    )
    return parser.parse_args(argv)


def _configure_logging(level_name: str) -> None:
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("solution_judge")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def main(argv: list[str] | None = None) -> None:
    ns = _parse_cli(argv)
    _configure_logging(ns.log_level)

    if not ns.config and not ns.demo:
        sys.exit("Error: provide --config PATH or --demo.")

    try:
        cfg: ProblemConfig = load_problem_config(ns.config if ns.config else C.DEMO_CONFIG)
    except SolverError as exc:
        sys.exit(f"Error: {exc}")

    if ns.max_trials is not None:
        if ns.max_trials <= 0:
            sys.exit("Error: --max-trials must be positive.")
        cfg.max_trials = ns.max_trials
    if ns.seed is not None:
        cfg.seed = ns.seed

    try:
        judge = cfg.build_judge(ns.strategy)
        result = cfg.build_solver(judge).solve()
    except SolverError as exc:
        sys.exit(f"Error: {exc}")

    summary = result.to_dict()
    summary["strategy"] = ns.strategy
    json_out = json.dumps(summary, ensure_ascii=False, separators=(",", ":"))
    if ns.out:
        Path(ns.out).write_text(json_out, "utf-8")
        print(f"✔ Summary written to {ns.out}")
    else:
        print(json_out)


if __name__ == "__main__":  # pragma: no cover
    main()
