"""Engine protocol surfaces (no implementations).

Searchers
=========

A ``Searcher`` proposes the next trial point from the current best point and
reacts when the harness reports a better one. Three implementations ship with
the package (see :mod:`randshrink.engine.searchers`):

- ``RandomSearcher`` samples changed variables over their full global limits.
- ``ShrinkSearcher`` samples inside per-variable windows that re-center and
  resize around each improvement.
- ``ComboSearcher`` holds one of each and picks, per changed variable, the
  shrink window 90% of the time and the full range otherwise.

Runs
====

An ``AlgorithmRun`` scores trial points for the search driver. It may raise
:class:`~randshrink.core.errors.RunTerminated` while scoring; the driver treats
that as the end of the current cycle.
"""

from __future__ import annotations

from typing import Protocol

from randshrink.core.trial_point import TrialPoint
from randshrink.core.variable import Variable


class Searcher(Protocol):
    """Proposes trial points and adapts to new best points."""

    def reset(self) -> None:
        """Forget adaptive history and search from scratch."""

    def new_top_solution(self, old_point: TrialPoint, new_point: TrialPoint) -> None:
        """Handle a new best point that replaces ``old_point``."""

    def next_trial_point(self, best_point: TrialPoint) -> TrialPoint:
        """Return the next point to evaluate, derived from ``best_point``."""

    def propose_value(self, variable: Variable) -> float:
        """Return a candidate value for one variable selected for change."""


class AlgorithmRun(Protocol):
    """Harness side of a search: scores points and judges improvements."""

    def evaluate_trial_point(self, point: TrialPoint) -> None:
        """Score ``point``; may raise ``RunTerminated``."""
