"""Random searcher that samples over each variable's full global range."""

from __future__ import annotations

from randshrink.core.variable import Variable
from randshrink.engine.searchers.base import BaseSearcher


class RandomSearcher(BaseSearcher):
    """Uniform sampling across the global limits of each changed variable.

    Holds no adaptive memory: ``reset`` and ``new_top_solution`` are no-ops.
    """

    def propose_value(self, variable: Variable) -> float:
        raw_value = self._rng.random()
        return variable.lower_limit + raw_value * (variable.upper_limit - variable.lower_limit)
