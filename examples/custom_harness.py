"""Drive RandomShrinkSearch from a hand-written harness.

The harness owns scoring and stopping; the search only proposes points and
adapts its windows when told about a new best point.
"""

from __future__ import annotations

from randshrink import Problem, RandomShrinkSearch, RunTerminated, TrialPoint, Variable
from randshrink.utils import get_logger

LOGGER = get_logger("examples")


class BudgetRun:
    """Score points until the budget is exhausted."""

    def __init__(self, search: RandomShrinkSearch, budget: int) -> None:
        self.search = search
        self.budget = budget
        self.evals = 0
        self.best_score = float("-inf")

    def evaluate_trial_point(self, point: TrialPoint) -> None:
        if self.evals >= self.budget:
            raise RunTerminated("budget exhausted")
        self.evals += 1
        score = -sum((value - 0.3) ** 2 for value in point.values())
        if score > self.best_score:
            self.best_score = score
            self.search.found_new_optimal_solution(point)


def main() -> None:
    problem = Problem(
        [
            Variable(name=f"k{i}", lower_limit=0.0, upper_limit=1.0, initial_value=0.9)
            for i in range(4)
        ]
    )
    search = RandomShrinkSearch(problem)
    search.reset()

    run = BudgetRun(search, budget=1000)
    while search.perform_run(run):
        pass

    LOGGER.info("Evaluations: %d, best score: %.6f", run.evals, run.best_score)
    for variable in problem.variables:
        LOGGER.info("%s window: %s", variable.name, search.search_window(variable))


if __name__ == "__main__":
    main()
