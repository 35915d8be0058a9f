"""Shared test fixtures for randshrink tests."""

import os

import pytest

from randshrink.core.hints import InitialDelta
from randshrink.core.problem import Problem
from randshrink.core.variable import Variable

# Recent MLflow releases refuse the file-based tracking store used by the tests
# unless explicitly opted in.
os.environ.setdefault("MLFLOW_ALLOW_FILE_STORE", "true")


@pytest.fixture
def x_var():
    return Variable(name="x", lower_limit=0.0, upper_limit=10.0, initial_value=5.0)


@pytest.fixture
def y_var():
    return Variable(name="y", lower_limit=0.0, upper_limit=20.0, initial_value=10.0)


@pytest.fixture
def xy_problem(x_var, y_var):
    """Two-variable problem with no hints (windows start at the full range)."""
    return Problem([x_var, y_var])


@pytest.fixture
def delta_problem(x_var, y_var):
    """Two-variable problem whose windows start at initial value +/- delta."""
    return Problem([x_var, y_var], hints=[InitialDelta({"x": 1.0, "y": 2.0})])


@pytest.fixture
def wide_problem():
    """Eight variables with mixed ranges."""
    variables = [
        Variable(name=f"v{i}", lower_limit=-float(i + 1), upper_limit=float(2 * i + 1), initial_value=0.0)
        for i in range(8)
    ]
    return Problem(variables)
