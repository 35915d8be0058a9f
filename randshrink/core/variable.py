"""Variable descriptor."""

from __future__ import annotations

import math
from dataclasses import dataclass

from randshrink.core.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class Variable:
    """One bounded, optimizable scalar.

    Variables are fixed for the life of a run and compared by value, so two
    descriptors with the same fields are interchangeable as mapping keys.
    """

    name: str
    lower_limit: float
    upper_limit: float
    initial_value: float

    def __post_init__(self) -> None:
        if not self.name:
            raise ConfigurationError("variable name must be a non-empty string")
        for label in ("lower_limit", "upper_limit", "initial_value"):
            value = getattr(self, label)
            if not math.isfinite(value):
                raise ConfigurationError(f"{self.name}: {label} must be finite, got {value!r}")
        if self.lower_limit > self.upper_limit:
            raise ConfigurationError(
                f"{self.name}: lower_limit {self.lower_limit} exceeds upper_limit {self.upper_limit}"
            )
        if not self.lower_limit <= self.initial_value <= self.upper_limit:
            raise ConfigurationError(
                f"{self.name}: initial_value {self.initial_value} outside "
                f"[{self.lower_limit}, {self.upper_limit}]"
            )

    @property
    def span(self) -> float:
        return self.upper_limit - self.lower_limit

    def contains(self, value: float) -> bool:
        return self.lower_limit <= value <= self.upper_limit
