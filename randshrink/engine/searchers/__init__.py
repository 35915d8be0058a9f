"""Searcher registry surface.

Provides a small factory to obtain a searcher by name.
"""

from __future__ import annotations

from typing import Final

from randshrink.core.problem import Problem
from randshrink.engine.searchers.base import BaseSearcher
from randshrink.engine.searchers.combo import ComboSearcher
from randshrink.engine.searchers.random import RandomSearcher
from randshrink.engine.searchers.shrink import ShrinkSearcher

_REGISTRY: Final[dict[str, type[BaseSearcher]]] = {
    "random": RandomSearcher,
    "shrink": ShrinkSearcher,
    "combo": ComboSearcher,
}


def searcher_from_name(name: str, problem: Problem, **params: object) -> BaseSearcher:
    """Return a searcher instance from the registry.

    Raises KeyError for unknown searchers.

    Parameters
    ----------
    name : str
        Searcher name: "random", "shrink", "combo"
    problem : Problem
        Problem whose variables the searcher proposes values for
    **params : object
        Constructor keyword parameters (e.g., seed)
    """
    key = name.lower()
    if key not in _REGISTRY:
        raise KeyError(f"Unknown searcher: {name}. Available: {list(_REGISTRY.keys())}")
    cls = _REGISTRY[key]
    return cls(problem, **params)  # type: ignore[arg-type]


__all__ = [
    "searcher_from_name",
    "BaseSearcher",
    "RandomSearcher",
    "ShrinkSearcher",
    "ComboSearcher",
]
