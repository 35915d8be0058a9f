"""Minimal example showing how to run the engine on a test function."""

from __future__ import annotations

import numpy as np

from randshrink import Engine, EngineConfig, InitialDelta, Problem, Variable


def rosenbrock(values: np.ndarray) -> float:
    x, y = values
    return float((1.0 - x) ** 2 + 100.0 * (y - x**2) ** 2)


def main() -> None:
    problem = Problem(
        [
            Variable(name="x", lower_limit=-2.0, upper_limit=2.0, initial_value=-1.5),
            Variable(name="y", lower_limit=-1.0, upper_limit=3.0, initial_value=2.0),
        ],
        hints=[InitialDelta({"x": 0.5, "y": 0.5})],
    )
    config = EngineConfig(max_evals=5000, minimize=True, method="random-shrink")
    engine = Engine(problem=problem, objective=rosenbrock, config=config)

    results = engine.run()

    print("Total evaluations:", results.summary["total_evals"])
    print("Improvements:", results.summary["improvements"])
    if results.best:
        print("Best score:", results.best.score)
        print("Best point:", results.best.point.to_dict())

    for stats in results.history[-5:]:
        print(
            f"Evaluation {stats.evaluation}: score={stats.score:.6f}"
            f" changed={','.join(stats.changed)}"
        )


if __name__ == "__main__":
    main()
