from __future__ import annotations

"""SymPy-backed objectives.

An :class:`ExpressionObjective` computes a trial's satisfaction by evaluating
a SymPy expression over the trial's variable values.  The expression is parsed
once with implicit multiplication enabled (``2x`` means ``2*x``) and compiled
with ``lambdify``.
"""

import math
from dataclasses import dataclass, field
from tokenize import TokenError
from typing import Any, Callable, Sequence

import sympy as sp
from sympy.parsing.sympy_parser import (
    implicit_multiplication,
    parse_expr,
    standard_transformations,
)

from .errors import ConfigError, InvalidTrial
from .problem import Objective, Score, Trial

_TRANSFORMATIONS = (*standard_transformations, implicit_multiplication)


def compile_expression(text: str, variables: Sequence[str]) -> tuple[sp.Expr, Callable[..., Any]]:
    """Parse ``text`` over ``variables`` and return ``(expr, fn)``.

    ``fn`` takes the variable values positionally in the given order.  Symbols
    other than ``variables`` raise :class:`ConfigError`.
    """

    symbols = [sp.Symbol(name) for name in variables]
    local = {s.name: s for s in symbols}
    try:
        expr = parse_expr(str(text), local_dict=local, transformations=_TRANSFORMATIONS)
    except (SyntaxError, TokenError, TypeError, ValueError, sp.SympifyError) as exc:
        raise ConfigError(f"cannot parse expression {text!r}: {exc}") from exc
    unknown = sorted(s.name for s in expr.free_symbols if s.name not in local)
    if unknown:
        raise ConfigError(f"expression {text!r} uses unknown variables: {', '.join(unknown)}")
    return expr, sp.lambdify(symbols, expr, modules="numpy")


@dataclass(eq=False)
class ExpressionObjective(Objective):
    """Objective whose satisfaction is an expression over the trial point."""

    expression: str = "0"
    variables: Sequence[str] = ()
    _expr: sp.Expr = field(init=False, repr=False)
    _fn: Callable[..., Any] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.variables = tuple(self.variables)
        self._expr, self._fn = compile_expression(self.expression, self.variables)

    @property
    def expr(self) -> sp.Expr:
        return self._expr

    def score(self, trial: Trial) -> Score:
        try:
            args = [trial.trial_point[name] for name in self.variables]
        except KeyError as exc:
            raise ConfigError(
                f"objective {self.name!r}: trial has no value for variable {exc.args[0]!r}"
            ) from exc
        try:
            value = float(self._fn(*args))
        except (ArithmeticError, TypeError, ValueError) as exc:
            raise InvalidTrial(
                f"objective {self.name!r}: cannot evaluate {self.expression!r}: {exc}", trial
            ) from exc
        if not math.isfinite(value):
            raise InvalidTrial(f"objective {self.name!r}: non-finite satisfaction {value!r}", trial)
        return Score(objective=self, satisfaction=value, value=value)
