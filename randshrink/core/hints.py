"""Initial search-range hints.

A problem may carry hints that seed the shrink searcher's windows. Hints are
advisory: the ranges they return are clamped into each variable's global
limits by :class:`~randshrink.engine.types.VariableWindow`.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import ClassVar

from randshrink.core.errors import ConfigurationError
from randshrink.core.variable import Variable


class DomainHint(ABC):
    """Supplies an initial ``(lower, upper)`` search range per variable."""

    TYPE: ClassVar[str]

    @abstractmethod
    def get_range(self, variable: Variable) -> tuple[float, float]:
        """Return the suggested range for ``variable``."""


class InitialDomain(DomainHint):
    """Absolute ranges keyed by variable name.

    Variables without an entry use their full global range.
    """

    TYPE: ClassVar[str] = "initial_domain"

    def __init__(self, ranges: Mapping[str, tuple[float, float]] | None = None) -> None:
        self._ranges: dict[str, tuple[float, float]] = {}
        for name, (lower, upper) in (ranges or {}).items():
            self.set_range(name, lower, upper)

    def set_range(self, name: str, lower: float, upper: float) -> None:
        if not (math.isfinite(lower) and math.isfinite(upper)):
            raise ConfigurationError(f"{name}: domain hint bounds must be finite")
        self._ranges[name] = (float(lower), float(upper))

    def get_range(self, variable: Variable) -> tuple[float, float]:
        if variable.name in self._ranges:
            return self._ranges[variable.name]
        return (variable.lower_limit, variable.upper_limit)

    def __repr__(self) -> str:
        return f"InitialDomain({self._ranges!r})"


class InitialDelta(DomainHint):
    """Symmetric deltas around each variable's initial value.

    The range for a variable with delta ``d`` is ``[initial - d, initial + d]``.
    Variables without an entry use their full global range.
    """

    TYPE: ClassVar[str] = "initial_delta"

    def __init__(self, deltas: Mapping[str, float] | None = None) -> None:
        self._deltas: dict[str, float] = {}
        for name, delta in (deltas or {}).items():
            self.set_delta(name, delta)

    def set_delta(self, name: str, delta: float) -> None:
        if not math.isfinite(delta) or delta < 0:
            raise ConfigurationError(f"{name}: delta must be finite and non-negative, got {delta!r}")
        self._deltas[name] = float(delta)

    def get_range(self, variable: Variable) -> tuple[float, float]:
        delta = self._deltas.get(variable.name)
        if delta is None:
            return (variable.lower_limit, variable.upper_limit)
        return (variable.initial_value - delta, variable.initial_value + delta)

    def __repr__(self) -> str:
        return f"InitialDelta({self._deltas!r})"


__all__ = ["DomainHint", "InitialDomain", "InitialDelta"]
