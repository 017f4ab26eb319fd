from __future__ import annotations

"""Problem model consumed by the judges.

A :class:`Problem` owns an ordered tuple of :class:`Objective` instances (and,
for the bundled solver, an ordered tuple of :class:`Variable` instances).  A
:class:`Trial` is one candidate point evaluated against that problem: it keeps
one :class:`Score` per objective plus a single ``satisfaction`` attribute that
judges overwrite every time they judge it.

Objectives hash by identity so two objectives that share a name remain
distinct weight keys.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True)
class Variable:
    """Bounded decision variable explored by the solver."""

    name: str
    lower: float
    upper: float
    initial: Optional[float] = None

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError(
                f"variable {self.name!r}: lower bound {self.lower} exceeds upper bound {self.upper}"
            )

    @property
    def starting_value(self) -> float:
        if self.initial is not None:
            return float(self.initial)
        return (float(self.lower) + float(self.upper)) / 2.0


@dataclass(eq=False)
class Objective:
    """Named evaluation criterion.

    Subclasses override :meth:`score` to turn a trial into a :class:`Score`.
    """

    name: str

    def score(self, trial: "Trial") -> "Score":
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


@dataclass(frozen=True)
class Score:
    """Evaluation of one objective against one trial."""

    objective: Objective
    satisfaction: float
    value: Any = None


class Problem:
    """Ordered objectives (and variables) for one search run."""

    def __init__(
        self,
        objectives: Iterable[Objective] = (),
        variables: Iterable[Variable] = (),
    ) -> None:
        self._objectives: Tuple[Objective, ...] = tuple(objectives)
        self._variables: Tuple[Variable, ...] = tuple(variables)

    @property
    def objectives(self) -> Tuple[Objective, ...]:
        return self._objectives

    @property
    def variables(self) -> Tuple[Variable, ...]:
        return self._variables

    def get_objective(self, name: str) -> Optional[Objective]:
        return next((o for o in self._objectives if o.name == name), None)

    def new_trial(self, trial_point: Mapping[str, float] | None = None) -> "Trial":
        point = {v.name: v.starting_value for v in self._variables}
        if trial_point:
            point.update({k: float(v) for k, v in trial_point.items()})
        return Trial(problem=self, trial_point=point)

    def evaluate(self, trial: "Trial") -> "Trial":
        """Ask every objective for its score and attach it to ``trial``."""

        for objective in self._objectives:
            trial.set_score(objective.score(trial))
        return trial

    def __repr__(self) -> str:
        names = ", ".join(o.name for o in self._objectives)
        return f"Problem(objectives=[{names}])"


@dataclass(eq=False)
class Trial:
    """Candidate solution under evaluation.

    ``satisfaction`` reflects the last judgment and is the only field a judge
    writes.
    """

    problem: Problem
    trial_point: Dict[str, float] = field(default_factory=dict)
    scores: Dict[Objective, Score] = field(default_factory=dict)
    satisfaction: float = 0.0

    def get_score(self, objective: Objective) -> Optional[Score]:
        return self.scores.get(objective)

    def set_score(self, score: Score) -> None:
        self.scores[score.objective] = score

    def summary(self) -> dict[str, Any]:
        return {
            "trial_point": dict(self.trial_point),
            "satisfaction": self.satisfaction,
            "scores": {o.name: s.satisfaction for o, s in self.scores.items()},
        }
