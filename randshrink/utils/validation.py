"""Validation helpers for randshrink."""

from __future__ import annotations

from typing import Iterable

from randshrink.core.errors import ConfigurationError
from randshrink.core.variable import Variable


def ensure_variables(variables: Iterable[Variable]) -> list[Variable]:
    """Return ``variables`` as a list, rejecting empty or ambiguous sets."""
    result: list[Variable] = []
    seen: set[str] = set()
    for idx, entry in enumerate(variables):
        if not isinstance(entry, Variable):
            msg = f"Entry {idx} is not a Variable: {entry!r}"
            raise ConfigurationError(msg)
        if entry.name in seen:
            msg = f"Duplicate variable name: {entry.name}"
            raise ConfigurationError(msg)
        seen.add(entry.name)
        result.append(entry)

    if not result:
        raise ConfigurationError("A problem needs at least one variable")
    return result
