"""MLflow integration for experiment tracking and reproducibility.

Tracks engine runs with MLflow so that seeds, budgets, improvement curves, and
final best points can be compared across runs.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path
from typing import Any

import mlflow

from randshrink.engine.engine import EngineConfig, EngineResults, ImprovementStats


class MLflowTracker:
    """Track optimization runs with MLflow.

    Parameters
    ----------
    experiment_name : str
        Name of the MLflow experiment.
    tracking_uri : str | None
        MLflow tracking server URI (default: local filesystem).
    """

    def __init__(
        self,
        experiment_name: str = "randshrink-search",
        tracking_uri: str | None = None,
    ) -> None:
        self.experiment_name = experiment_name
        self.tracking_uri = tracking_uri or "./mlruns"

        mlflow.set_tracking_uri(self.tracking_uri)

        experiment = mlflow.get_experiment_by_name(experiment_name)
        if experiment is None:
            self.experiment_id = mlflow.create_experiment(experiment_name)
        else:
            self.experiment_id = experiment.experiment_id

    def start_run(self, run_name: str | None = None) -> None:
        mlflow.set_experiment(self.experiment_name)
        mlflow.start_run(run_name=run_name)

    def end_run(self) -> None:
        mlflow.end_run()

    def log_config(self, config: EngineConfig) -> None:
        """Log engine configuration as parameters."""
        params = config.as_dict()
        extra = params.pop("extra", {})
        mlflow.log_params(params)
        if extra:
            mlflow.log_params({f"extra_{k}": v for k, v in extra.items()})

    def log_improvement(self, stats: ImprovementStats) -> None:
        """Log one improvement, stepped by its evaluation index.

        Suitable as the engine's ``on_improvement`` callback.
        """
        mlflow.log_metrics(
            {"best_score": stats.score, "changed_variables": float(len(stats.changed))},
            step=stats.evaluation,
        )

    def log_results(self, results: EngineResults) -> None:
        """Log final optimization results."""
        if results.best is not None:
            mlflow.log_metric("final_best_score", results.best.score)
            for name, value in results.best.point.to_dict().items():
                mlflow.log_param(f"best_{name}", value)

        for key, value in (results.summary or {}).items():
            if isinstance(value, bool):
                mlflow.log_param(f"summary_{key}", str(value))
            elif isinstance(value, (int, float)):
                mlflow.log_metric(f"summary_{key}", value)
            elif key not in ("config", "best_point"):
                mlflow.log_param(f"summary_{key}", str(value))

    def log_artifact_json(self, data: dict[str, Any], filename: str = "results.json") -> None:
        """Log a dictionary as a JSON artifact."""
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / filename
            with open(path, "w") as f:
                json.dump(data, f, indent=2)
            mlflow.log_artifact(str(path))
