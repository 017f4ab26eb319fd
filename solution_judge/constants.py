"""Package‑wide constants and demo assets."""

from typing import Any

DEFAULT_WEIGHT = 1.0

DEFAULT_MAX_TRIALS = 200

# Two bounded variables pulled toward different targets; B counts double.
DEMO_CONFIG: dict[str, Any] = {
    "variables": [
        {"name": "x", "lower": 0.0, "upper": 1.0},
        {"name": "y", "lower": 0.0, "upper": 1.0},
    ],
    "objectives": [
        {"name": "A", "expression": "1 - (x - 0.3)**2"},
        {"name": "B", "expression": "1 - (y - 0.7)**2", "weight": 2.0},
    ],
    "solver": {"max_trials": DEFAULT_MAX_TRIALS, "seed": 7},
}

__all__ = [
    "DEFAULT_WEIGHT",
    "DEFAULT_MAX_TRIALS",
    "DEMO_CONFIG",
]
