"""Helpers for running a random shrink search against an objective.

The engine is the scoring side of a search: the driver proposes points, the
engine scores them with the objective, keeps the best trial, reports each
strict improvement back to the driver, and ends the run by raising
``RunTerminated`` once its evaluation budget or patience is used up.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field

import numpy as np

from randshrink.core.errors import ConfigurationError, RunTerminated
from randshrink.core.problem import Problem
from randshrink.core.trial_point import TrialPoint
from randshrink.engine.search import RandomShrinkSearch
from randshrink.engine.types import Trial

ObjectiveFn = Callable[[np.ndarray], float]
ImprovementCallback = Callable[["ImprovementStats"], None]

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """User-facing settings that control an engine run.

    ``method`` is only a descriptive label for logs and tracking.
    """

    max_evals: int = 1000
    seed: int = 0
    minimize: bool = False
    early_stop_patience: int | None = None
    method: str = "random-shrink"
    extra: Mapping[str, int | float | str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.max_evals < 1:
            raise ConfigurationError("max_evals must be >= 1")
        if self.early_stop_patience is not None and self.early_stop_patience < 1:
            raise ConfigurationError("early_stop_patience must be >= 1 when set")

    def as_dict(self) -> dict[str, object]:
        return {
            "max_evals": self.max_evals,
            "seed": self.seed,
            "minimize": self.minimize,
            "early_stop_patience": self.early_stop_patience,
            "method": self.method,
            "extra": dict(self.extra),
        }


@dataclass(frozen=True, slots=True)
class ImprovementStats:
    """Record of one strict improvement.

    ``evaluation`` is the 1-based index of the evaluation that produced it and
    ``changed`` names the variables that moved relative to the previous best.
    """

    evaluation: int
    score: float
    previous_score: float | None
    changed: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class EngineResults:
    """Final results emitted by the engine."""

    best: Trial | None
    history: list[ImprovementStats]
    summary: Mapping[str, object]


class Engine:
    """Drives a search against an objective until the budget runs out.

    The objective receives the point's values as a float array in problem
    variable order. Higher scores are better unless ``config.minimize`` is set.
    Exceptions raised by the objective propagate; non-finite scores are logged
    and never count as improvements.
    """

    def __init__(
        self,
        *,
        problem: Problem,
        objective: ObjectiveFn,
        config: EngineConfig | None = None,
        search: RandomShrinkSearch | None = None,
        on_improvement: ImprovementCallback | None = None,
    ) -> None:
        self._problem = problem
        self._objective = objective
        self._config = config or EngineConfig()
        self._search = search or RandomShrinkSearch(problem, seed=self._config.seed)
        self._on_improvement = on_improvement
        self._reset_state()

    @property
    def search(self) -> RandomShrinkSearch:
        return self._search

    @property
    def evaluations(self) -> int:
        return self._evals

    @property
    def best(self) -> Trial | None:
        return self._best

    def _reset_state(self) -> None:
        self._evals = 0
        self._since_improvement = 0
        self._best: Trial | None = None
        self._history: list[ImprovementStats] = []
        self._stop_reason: str | None = None

    def run(self) -> EngineResults:
        """Reset the search, score the initial point, then search until stopped."""

        self._search.reset()
        self._reset_state()
        _LOGGER.info(
            "Starting %s over %d variables (max_evals=%d)",
            self._search.label,
            len(self._problem.variables),
            self._config.max_evals,
        )

        start = time.perf_counter()
        self.evaluate_trial_point(self._problem.initial_point())
        while self._search.perform_run(self):
            pass
        elapsed = time.perf_counter() - start

        _LOGGER.info(
            "Stopped after %d evaluations (%s); best score %s",
            self._evals,
            self._stop_reason,
            None if self._best is None else self._best.score,
        )

        summary: dict[str, object] = {
            "config": self._config.as_dict(),
            "total_evals": self._evals,
            "improvements": len(self._history),
            "stop_reason": self._stop_reason,
            "stopped_early": self._stop_reason == "patience",
            "elapsed_s": elapsed,
        }
        if self._best is not None:
            summary["best_score"] = self._best.score
            summary["best_point"] = self._best.point.to_dict()

        return EngineResults(best=self._best, history=list(self._history), summary=summary)

    def evaluate_trial_point(self, point: TrialPoint) -> None:
        """Score ``point`` and report it to the search if it is a new best."""

        self._check_budget()

        score = float(self._objective(point.to_array(self._problem.variables)))
        self._evals += 1

        if not math.isfinite(score):
            _LOGGER.warning("Objective returned non-finite score %r at %r", score, point)
            self._since_improvement += 1
            return

        if self._best is not None and not self._is_better(score, self._best.score):
            self._since_improvement += 1
            return

        previous = self._best
        self._best = Trial(point=point, score=score)
        self._since_improvement = 0

        changed: tuple[str, ...]
        if previous is None:
            changed = ()
        else:
            changed = tuple(
                variable.name
                for variable in self._problem.variables
                if point.value(variable) != previous.point.value(variable)
            )

        stats = ImprovementStats(
            evaluation=self._evals,
            score=score,
            previous_score=None if previous is None else previous.score,
            changed=changed,
        )
        self._history.append(stats)
        self._search.found_new_optimal_solution(point)
        _LOGGER.debug("New best score %r at evaluation %d", score, self._evals)

        if self._on_improvement is not None:
            self._on_improvement(stats)

    def _check_budget(self) -> None:
        if self._evals >= self._config.max_evals:
            self._stop_reason = "max_evals"
            raise RunTerminated(f"evaluation budget of {self._config.max_evals} reached")

        patience = self._config.early_stop_patience
        if patience is not None and self._since_improvement >= patience:
            self._stop_reason = "patience"
            raise RunTerminated(f"no improvement in {patience} evaluations")

    def _is_better(self, score: float, best_score: float) -> bool:
        if self._config.minimize:
            return score < best_score
        return score > best_score


__all__ = ["Engine", "EngineConfig", "EngineResults", "ImprovementStats", "ObjectiveFn"]
