"""Shared engine datatypes."""

from __future__ import annotations

import math
from dataclasses import dataclass

from randshrink.core.errors import ConfigurationError
from randshrink.core.trial_point import TrialPoint
from randshrink.core.variable import Variable


@dataclass(slots=True)
class VariableWindow:
    """Current sampling range for one variable.

    The window always satisfies
    ``variable.lower_limit <= lower <= upper <= variable.upper_limit``; every
    update goes through :meth:`set_limits`, which clamps into the global limits.
    """

    variable: Variable
    lower: float
    upper: float

    def __post_init__(self) -> None:
        self.set_limits(self.lower, self.upper)

    @classmethod
    def for_variable(
        cls, variable: Variable, lower: float | None = None, upper: float | None = None
    ) -> VariableWindow:
        """Build a window from an advisory range (defaults to the global limits)."""
        lower = variable.lower_limit if lower is None else lower
        upper = variable.upper_limit if upper is None else upper
        return cls(variable=variable, lower=lower, upper=upper)

    def set_limits(self, lower: float, upper: float) -> None:
        if not (math.isfinite(lower) and math.isfinite(upper)):
            raise ConfigurationError(
                f"{self.variable.name}: window limits must be finite, got ({lower!r}, {upper!r})"
            )
        if lower > upper:
            lower, upper = upper, lower
        lo = self.variable.lower_limit
        hi = self.variable.upper_limit
        self.lower = min(max(lower, lo), hi)
        self.upper = max(min(upper, hi), self.lower)

    def recenter(self, center: float, half_width: float) -> None:
        """Center the window on ``center`` with the given half width."""
        self.set_limits(center - half_width, center + half_width)

    def sample(self, u: float) -> float:
        """Map a uniform draw in ``[0, 1)`` onto the window."""
        return self.lower + u * (self.upper - self.lower)

    @property
    def width(self) -> float:
        return self.upper - self.lower

    def as_tuple(self) -> tuple[float, float]:
        return (self.lower, self.upper)

    def __str__(self) -> str:
        return f"lower limit: {self.lower}, upper limit: {self.upper}"


@dataclass(frozen=True, slots=True)
class Trial:
    """A scored trial point."""

    point: TrialPoint
    score: float
