from __future__ import annotations

"""Exception types raised by the solution judge package."""

from typing import Any


class SolverError(Exception):
    """Base class for all package errors."""


class InvalidTrial(SolverError, ValueError):
    """A trial cannot be judged against its problem.

    Raised when the problem has no objectives, when a score is missing for one
    of the problem's objectives, or when the objective weights sum to zero.
    """

    def __init__(self, reason: str, trial: Any = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.trial = trial


class ConfigError(SolverError, ValueError):
    """Malformed problem configuration."""
