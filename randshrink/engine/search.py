"""Random shrink search driver.

``RandomShrinkSearch`` looks for points bounded by the variable limits. Every
proposal changes a randomly chosen subset of variables. A changed variable
takes a value drawn uniformly from its search window (most of the time) or
from its full range (occasionally). Windows begin at the problem's hint
range, and whenever a better solution is reported each moved variable's window
is re-centered on the new best value with a half width three times the move,
then clipped to the variable limits. Windows may grow or shrink with the
distance between successive best points, and tend to close in around the
optimum as it is approached.
"""

from __future__ import annotations

import logging
from typing import ClassVar

from randshrink.core.errors import RunTerminated
from randshrink.core.problem import Problem
from randshrink.core.trial_point import TrialPoint
from randshrink.core.variable import Variable
from randshrink.engine.interfaces import AlgorithmRun
from randshrink.engine.searchers.combo import ComboSearcher
from randshrink.engine.types import VariableWindow

_LOGGER = logging.getLogger(__name__)


class RandomShrinkSearch:
    """Owns the current best point and the active searcher.

    Call :meth:`reset` before the first proposal. The harness then alternates
    :meth:`next_trial_point` and, whenever it judges a point strictly better
    than everything seen so far, :meth:`found_new_optimal_solution`.

    Parameters
    ----------
    problem : Problem
        Variables and hints to search with.
    seed : int
        Seed for the searcher streams; fixed by default so runs are repeatable.
    """

    label: ClassVar[str] = "Random Shrink Search"
    global_rating: ClassVar[int] = 8
    local_rating: ClassVar[int] = 5

    def __init__(self, problem: Problem, *, seed: int = 0) -> None:
        self._problem = problem
        self._seed = seed
        self._searcher: ComboSearcher | None = None
        self._best_point: TrialPoint | None = None

    @property
    def problem(self) -> Problem:
        return self._problem

    @property
    def best_point(self) -> TrialPoint | None:
        return self._best_point

    @property
    def searcher(self) -> ComboSearcher:
        if self._searcher is None:
            raise RuntimeError("RandomShrinkSearch.reset() must be called before searching")
        return self._searcher

    def reset(self) -> None:
        """Search from scratch: fresh windows, fresh streams, initial best point."""
        self._searcher = ComboSearcher(self._problem, seed=self._seed)
        self._reset_best_point()
        _LOGGER.debug("Reset search over %d variables", len(self._problem.variables))

    def _reset_best_point(self) -> None:
        self._best_point = self._problem.initial_point()

    def next_trial_point(self) -> TrialPoint:
        """Return the next point to evaluate."""
        # reset() sets the searcher and the best point together.
        return self.searcher.next_trial_point(self._best_point)  # type: ignore[arg-type]

    def found_new_optimal_solution(self, new_point: TrialPoint) -> None:
        """Adopt ``new_point`` as the best point and adapt the search windows."""
        if self._best_point is None:
            self._best_point = new_point
            return

        old_point = self._best_point
        self.searcher.new_top_solution(old_point, new_point)
        self._best_point = new_point

    def perform_run(self, run: AlgorithmRun) -> bool:
        """Evaluate one proposal through ``run``.

        Returns ``False`` when the run terminated while scoring the proposal,
        in which case the proposal is discarded.
        """
        try:
            run.evaluate_trial_point(self.next_trial_point())
        except RunTerminated:
            _LOGGER.debug("Run terminated during evaluation; proposal discarded")
            return False
        return True

    def search_window(self, variable: Variable) -> VariableWindow:
        return self.searcher.search_window(variable)
