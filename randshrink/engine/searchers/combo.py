"""Combination of shrink and random sampling, chosen per variable."""

from __future__ import annotations

from typing import ClassVar

from randshrink.core.problem import Problem
from randshrink.core.trial_point import TrialPoint
from randshrink.core.variable import Variable
from randshrink.engine.searchers.base import BaseSearcher
from randshrink.engine.searchers.random import RandomSearcher
from randshrink.engine.searchers.shrink import ShrinkSearcher
from randshrink.engine.types import VariableWindow


class ComboSearcher(BaseSearcher):
    """Blend window sampling with occasional full-range sampling.

    For every variable picked for change, a fresh draw below
    ``SHRINK_THRESHOLD`` takes the value from the owned :class:`ShrinkSearcher`;
    otherwise the owned :class:`RandomSearcher` supplies it. The blend is decided
    per variable and per proposal. Window updates go to the shrink searcher.

    Parameters
    ----------
    problem : Problem
        Variables to search over.
    seed : int
        Seed shared by this searcher and its two sub-searchers; each still owns
        a separate stream.
    """

    SHRINK_THRESHOLD: ClassVar[float] = 0.9

    def __init__(self, problem: Problem, *, seed: int = 0) -> None:
        super().__init__(problem, seed=seed)
        self._shrink_searcher = ShrinkSearcher(problem, seed=seed)
        self._random_searcher = RandomSearcher(problem, seed=seed)

    @property
    def shrink_searcher(self) -> ShrinkSearcher:
        return self._shrink_searcher

    @property
    def random_searcher(self) -> RandomSearcher:
        return self._random_searcher

    def reset(self) -> None:
        self._shrink_searcher.reset()

    def new_top_solution(self, old_point: TrialPoint, new_point: TrialPoint) -> None:
        self._shrink_searcher.new_top_solution(old_point, new_point)

    def search_window(self, variable: Variable) -> VariableWindow:
        return self._shrink_searcher.search_window(variable)

    def propose_value(self, variable: Variable) -> float:
        selection = self._rng.random()
        if selection < self.SHRINK_THRESHOLD:
            return self._shrink_searcher.propose_value(variable)
        return self._random_searcher.propose_value(variable)
