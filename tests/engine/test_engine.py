import math

import numpy as np
import pytest

from randshrink.core.errors import ConfigurationError
from randshrink.core.problem import Problem
from randshrink.core.variable import Variable
from randshrink.engine import Engine, EngineConfig, RandomShrinkSearch


def _sphere_problem(dims=3):
    variables = [
        Variable(name=f"x{i}", lower_limit=-5.0, upper_limit=5.0, initial_value=4.0)
        for i in range(dims)
    ]
    return Problem(variables)


def _neg_sphere(values: np.ndarray) -> float:
    return -float(np.sum((values - 1.0) ** 2))


class TestEngineConfig:
    def test_defaults(self):
        config = EngineConfig()
        assert config.max_evals == 1000
        assert config.seed == 0
        assert config.minimize is False
        assert config.as_dict()["method"] == "random-shrink"

    @pytest.mark.parametrize(
        "kwargs", [{"max_evals": 0}, {"early_stop_patience": 0}, {"max_evals": -3}]
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ConfigurationError):
            EngineConfig(**kwargs)


class TestEngine:
    """Integration tests for Engine with RandomShrinkSearch."""

    def test_respects_evaluation_budget(self):
        problem = _sphere_problem()
        engine = Engine(problem=problem, objective=_neg_sphere, config=EngineConfig(max_evals=50))
        results = engine.run()

        assert engine.evaluations == 50
        assert results.summary["total_evals"] == 50
        assert results.summary["stop_reason"] == "max_evals"
        assert results.summary["stopped_early"] is False

    def test_improves_on_the_initial_point(self):
        problem = _sphere_problem()
        initial_score = _neg_sphere(problem.initial_point().to_array())
        engine = Engine(problem=problem, objective=_neg_sphere, config=EngineConfig(max_evals=2000))
        results = engine.run()

        assert results.best is not None
        assert results.best.score > initial_score
        assert results.best.score > -1.0
        for variable in problem.variables:
            assert variable.contains(results.best.point[variable])

    def test_history_is_strictly_improving(self):
        problem = _sphere_problem()
        engine = Engine(problem=problem, objective=_neg_sphere, config=EngineConfig(max_evals=500))
        results = engine.run()

        history = results.history
        assert history[0].evaluation == 1
        assert history[0].previous_score is None
        assert history[0].changed == ()
        for prev, cur in zip(history, history[1:]):
            assert cur.score > prev.score
            assert cur.previous_score == prev.score
            assert cur.evaluation > prev.evaluation
            assert cur.changed
        assert results.summary["improvements"] == len(history)
        assert results.summary["best_score"] == history[-1].score

    def test_driver_tracks_engine_best(self):
        problem = _sphere_problem()
        engine = Engine(problem=problem, objective=_neg_sphere, config=EngineConfig(max_evals=300))
        results = engine.run()
        assert engine.search.best_point == results.best.point

    def test_minimize(self):
        problem = _sphere_problem(2)
        engine = Engine(
            problem=problem,
            objective=lambda values: float(np.sum((values - 1.0) ** 2)),
            config=EngineConfig(max_evals=800, minimize=True),
        )
        results = engine.run()
        assert results.best.score < 1.0
        assert all(b.score < a.score for a, b in zip(results.history, results.history[1:]))

    def test_early_stop_patience(self):
        problem = _sphere_problem()
        engine = Engine(
            problem=problem,
            objective=lambda values: 0.0,
            config=EngineConfig(max_evals=1000, early_stop_patience=5),
        )
        results = engine.run()

        assert results.summary["stop_reason"] == "patience"
        assert results.summary["stopped_early"] is True
        assert engine.evaluations == 6

    def test_non_finite_scores_are_not_improvements(self, caplog):
        problem = _sphere_problem(1)

        def objective(values):
            return math.nan if values[0] > 0 else -abs(float(values[0]))

        engine = Engine(problem=problem, objective=objective, config=EngineConfig(max_evals=40))
        with caplog.at_level("WARNING"):
            results = engine.run()

        assert any("non-finite" in rec.message for rec in caplog.records)
        if results.best is not None:
            assert math.isfinite(results.best.score)

    def test_objective_errors_propagate(self):
        problem = _sphere_problem(1)

        def objective(values):
            raise RuntimeError("simulator crashed")

        engine = Engine(problem=problem, objective=objective)
        with pytest.raises(RuntimeError, match="simulator crashed"):
            engine.run()

    def test_runs_are_reproducible(self):
        problem = _sphere_problem()
        a = Engine(problem=problem, objective=_neg_sphere, config=EngineConfig(max_evals=200)).run()
        b = Engine(problem=problem, objective=_neg_sphere, config=EngineConfig(max_evals=200)).run()
        assert a.best == b.best
        assert [s.evaluation for s in a.history] == [s.evaluation for s in b.history]

    def test_on_improvement_callback(self):
        problem = _sphere_problem()
        seen = []
        engine = Engine(
            problem=problem,
            objective=_neg_sphere,
            config=EngineConfig(max_evals=100),
            on_improvement=seen.append,
        )
        results = engine.run()
        assert seen == results.history

    def test_accepts_existing_search(self):
        problem = _sphere_problem()
        search = RandomShrinkSearch(problem, seed=11)
        engine = Engine(problem=problem, objective=_neg_sphere, search=search)
        assert engine.search is search
