"""Change selection shared by every searcher."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import ClassVar

from randshrink.core.errors import ConfigurationError
from randshrink.core.problem import Problem
from randshrink.core.trial_point import MutableTrialPoint, TrialPoint
from randshrink.core.variable import Variable


class BaseSearcher(ABC):
    """Build proposals by changing a random subset of variables.

    Each variable is picked independently with probability
    ``expected_num_to_change / N``, starting from an expectation of one. When a
    round picks nothing, the expectation is redrawn uniformly from ``1..N`` and
    the round repeats. Subclasses only decide the value a picked variable gets.

    Parameters
    ----------
    problem : Problem
        Variables to search over.
    seed : int
        Seed of this searcher's private random stream.
    """

    MAX_SELECTION_ROUNDS: ClassVar[int] = 64

    def __init__(self, problem: Problem, *, seed: int = 0) -> None:
        num_variables = len(problem.variables)
        if num_variables == 0:
            raise ConfigurationError("Cannot search a problem without variables")
        self._problem = problem
        self._num_variables = num_variables
        self._change_probability_base = 1.0 / num_variables
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def problem(self) -> Problem:
        return self._problem

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self) -> None:
        """Forget history; searchers without adaptive state do nothing."""

    def new_top_solution(self, old_point: TrialPoint, new_point: TrialPoint) -> None:
        """Searchers without adaptive state ignore new best points."""

    def next_trial_point(self, best_point: TrialPoint) -> TrialPoint:
        builder = MutableTrialPoint.from_point(best_point)
        expected_num_to_change = 1
        for _ in range(self.MAX_SELECTION_ROUNDS - 1):
            if self._change_variables(builder, expected_num_to_change):
                return builder.trial_point()
            expected_num_to_change = self._rng.randint(1, self._num_variables)
        # Expecting N changes selects every variable.
        self._change_variables(builder, self._num_variables)
        return builder.trial_point()

    def _change_variables(self, builder: MutableTrialPoint, expected_num_to_change: int) -> bool:
        if expected_num_to_change >= self._num_variables:
            change_probability = 1.0
        else:
            change_probability = expected_num_to_change * self._change_probability_base
        changed = False
        for variable in self._problem.variables:
            if self._rng.random() <= change_probability:
                changed = True
                builder.set_value(variable, self.propose_value(variable))
        return changed

    @abstractmethod
    def propose_value(self, variable: Variable) -> float:
        """Return a candidate value for ``variable``."""
