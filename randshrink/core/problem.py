"""Problem definition consumed by the search engine."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping

from randshrink.core.errors import ConfigurationError
from randshrink.core.trial_point import MutableTrialPoint, TrialPoint
from randshrink.core.variable import Variable
from randshrink.core.hints import DomainHint
from randshrink.utils.validation import ensure_variables


class Problem:
    """Ordered variables plus optional initial-range hints.

    The order of ``variables`` is the iteration order used by every searcher.
    At most one hint of each type may be attached.
    """

    def __init__(self, variables: Iterable[Variable], hints: Iterable[DomainHint] = ()) -> None:
        self._variables = tuple(ensure_variables(variables))
        self._by_name = {variable.name: variable for variable in self._variables}
        self._hints: dict[str, DomainHint] = {}
        for hint in hints:
            self.add_hint(hint)

    @property
    def variables(self) -> tuple[Variable, ...]:
        return self._variables

    def variable(self, name: str) -> Variable:
        try:
            return self._by_name[name]
        except KeyError:
            raise ConfigurationError(f"Unknown variable: {name}") from None

    def add_hint(self, hint: DomainHint) -> None:
        if hint.TYPE in self._hints:
            raise ConfigurationError(f"Problem already has a {hint.TYPE} hint")
        self._hints[hint.TYPE] = hint

    def get_hint(self, type_key: str) -> DomainHint | None:
        return self._hints.get(type_key)

    def initial_point(self) -> TrialPoint:
        builder = MutableTrialPoint()
        for variable in self._variables:
            builder.set_value(variable, variable.initial_value)
        return builder.trial_point()

    def point(self, values: Mapping[str, float]) -> TrialPoint:
        """Build a point from ``{name: value}`` covering every variable."""
        unknown = set(values) - set(self._by_name)
        if unknown:
            raise ConfigurationError(f"Unknown variables: {sorted(unknown)}")
        missing = [variable.name for variable in self._variables if variable.name not in values]
        if missing:
            raise ConfigurationError(f"Missing values for variables: {missing}")

        builder = MutableTrialPoint()
        for variable in self._variables:
            value = float(values[variable.name])
            if not math.isfinite(value):
                raise ConfigurationError(f"{variable.name}: value must be finite, got {value!r}")
            if not variable.contains(value):
                raise ConfigurationError(
                    f"{variable.name}: value {value} outside "
                    f"[{variable.lower_limit}, {variable.upper_limit}]"
                )
            builder.set_value(variable, value)
        return builder.trial_point()

    def __repr__(self) -> str:
        names = ", ".join(variable.name for variable in self._variables)
        return f"Problem(variables=[{names}], hints={sorted(self._hints)})"
