"""Shrink searcher: window-based sampling around recent improvements.

Every variable has its own search window. Windows start from the problem's
initial-range hint (an ``InitialDelta`` is preferred over an
``InitialDomain``; without either, the full global range is used). When a new
best point arrives, each variable that moved gets a window centered on its new
value, ``WINDOW_SCALE`` times the move on either side, clipped to the global
limits. As improvements get smaller the windows narrow around the optimum;
a large jump widens them again.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import ClassVar

from randshrink.core.hints import DomainHint, InitialDelta, InitialDomain
from randshrink.core.problem import Problem
from randshrink.core.trial_point import TrialPoint
from randshrink.core.variable import Variable
from randshrink.engine.searchers.base import BaseSearcher
from randshrink.engine.types import VariableWindow

_LOGGER = logging.getLogger(__name__)


class ShrinkSearcher(BaseSearcher):
    """Sample each changed variable uniformly inside its current window."""

    WINDOW_SCALE: ClassVar[float] = 3.0

    def __init__(self, problem: Problem, *, seed: int = 0) -> None:
        super().__init__(problem, seed=seed)
        self._windows: dict[Variable, VariableWindow] = {}
        self.reset()

    def reset(self) -> None:
        """Rebuild every window from the problem's hint."""
        self._build_windows()

    def search_window(self, variable: Variable) -> VariableWindow:
        return self._windows[variable]

    def search_windows(self) -> Mapping[Variable, VariableWindow]:
        return MappingProxyType(self._windows)

    def log_search_windows(self, message: str = "") -> None:
        if not _LOGGER.isEnabledFor(logging.DEBUG):
            return
        _LOGGER.debug("Variable search windows %s", message)
        for variable in self._problem.variables:
            window = self._windows[variable]
            _LOGGER.debug("  %s: [%r, %r]", variable.name, window.lower, window.upper)

    def new_top_solution(self, old_point: TrialPoint, new_point: TrialPoint) -> None:
        for variable in self._problem.variables:
            new_value = new_point.value(variable)
            old_value = old_point.value(variable)
            if new_value == old_value:
                continue

            half_width = self.WINDOW_SCALE * abs(new_value - old_value)
            self._windows[variable].recenter(new_value, half_width)

        self.log_search_windows("after new top solution")

    def propose_value(self, variable: Variable) -> float:
        raw_value = self._rng.random()
        return self._windows[variable].sample(raw_value)

    def _select_hint(self) -> DomainHint | None:
        delta_hint = self._problem.get_hint(InitialDelta.TYPE)
        if delta_hint is not None:
            return delta_hint
        return self._problem.get_hint(InitialDomain.TYPE)

    def _build_windows(self) -> None:
        hint = self._select_hint()
        windows: dict[Variable, VariableWindow] = {}
        for variable in self._problem.variables:
            if hint is None:
                windows[variable] = VariableWindow.for_variable(variable)
            else:
                lower, upper = hint.get_range(variable)
                windows[variable] = VariableWindow.for_variable(variable, lower, upper)
        self._windows = windows
        self.log_search_windows("after reset")
