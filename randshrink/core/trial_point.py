"""Trial point data structures."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

import numpy as np

from randshrink.core.variable import Variable


class TrialPoint(Mapping[Variable, float]):
    """Immutable assignment of one value per variable.

    A point copies the values it is given and never changes afterwards.
    Equality and hashing are by value.
    """

    __slots__ = ("_values", "_hash")

    def __init__(self, values: Mapping[Variable, float]) -> None:
        self._values: dict[Variable, float] = {var: float(val) for var, val in values.items()}
        self._hash: int | None = None

    def __getitem__(self, variable: Variable) -> float:
        return self._values[variable]

    def __iter__(self) -> Iterator[Variable]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TrialPoint):
            return self._values == other._values
        return NotImplemented

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._values.items()))
        return self._hash

    def __repr__(self) -> str:
        body = ", ".join(f"{var.name}={val!r}" for var, val in self._values.items())
        return f"TrialPoint({body})"

    def value(self, variable: Variable) -> float:
        return self._values[variable]

    def value_of(self, name: str) -> float:
        """Return the value of the variable called ``name``."""
        for variable, value in self._values.items():
            if variable.name == name:
                return value
        raise KeyError(name)

    def value_map(self) -> dict[Variable, float]:
        """Return a mutable copy of the underlying values."""
        return dict(self._values)

    def to_array(self, variables: Iterable[Variable] | None = None) -> np.ndarray:
        """Return values as a float array, in ``variables`` order if given."""
        order = list(self._values) if variables is None else list(variables)
        return np.array([self._values[var] for var in order], dtype=np.float64)

    def to_dict(self) -> dict[str, float]:
        return {var.name: val for var, val in self._values.items()}


@dataclass(slots=True)
class MutableTrialPoint:
    """Builder used while composing a point; freeze with :meth:`trial_point`."""

    values: dict[Variable, float] = field(default_factory=dict)

    @classmethod
    def from_point(cls, point: TrialPoint) -> MutableTrialPoint:
        return cls(values=point.value_map())

    def set_value(self, variable: Variable, value: float) -> None:
        self.values[variable] = float(value)

    def update(self, values: Mapping[Variable, float]) -> None:
        for variable, value in values.items():
            self.set_value(variable, value)

    def trial_point(self) -> TrialPoint:
        return TrialPoint(self.values)
