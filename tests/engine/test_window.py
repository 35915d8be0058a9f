import math

import pytest

from randshrink.core.errors import ConfigurationError
from randshrink.core.variable import Variable
from randshrink.engine.types import VariableWindow


@pytest.fixture
def var():
    return Variable(name="x", lower_limit=0.0, upper_limit=10.0, initial_value=5.0)


class TestVariableWindow:
    """Window construction and clamping."""

    def test_defaults_to_global_limits(self, var):
        window = VariableWindow.for_variable(var)
        assert window.as_tuple() == (0.0, 10.0)
        assert window.width == 10.0

    def test_advisory_range_is_clamped(self, var):
        window = VariableWindow.for_variable(var, -4.0, 12.0)
        assert window.as_tuple() == (0.0, 10.0)

    def test_range_outside_limits_collapses_to_the_edge(self, var):
        window = VariableWindow.for_variable(var, 12.0, 15.0)
        assert window.as_tuple() == (10.0, 10.0)

    def test_reversed_range_is_reordered(self, var):
        window = VariableWindow.for_variable(var, 7.0, 3.0)
        assert window.as_tuple() == (3.0, 7.0)

    def test_recenter_clamps(self, var):
        window = VariableWindow.for_variable(var)
        window.recenter(6.0, 3.0)
        assert window.as_tuple() == (3.0, 9.0)
        window.recenter(9.0, 3.0)
        assert window.as_tuple() == (6.0, 10.0)

    def test_sample_maps_unit_interval(self, var):
        window = VariableWindow.for_variable(var, 2.0, 6.0)
        assert window.sample(0.0) == 2.0
        assert window.sample(0.5) == 4.0
        assert window.sample(0.999) < 6.0

    @pytest.mark.parametrize(
        "lower, upper",
        [(-100.0, 100.0), (3.0, 3.0), (11.0, -1.0), (-5.0, -2.0), (4.0, 40.0)],
    )
    def test_containment_invariant(self, var, lower, upper):
        window = VariableWindow.for_variable(var)
        window.set_limits(lower, upper)
        assert var.lower_limit <= window.lower <= window.upper <= var.upper_limit

    @pytest.mark.parametrize(
        "lower, upper",
        [(math.nan, 5.0), (2.0, math.nan), (-math.inf, 5.0), (2.0, math.inf)],
    )
    def test_non_finite_limits_rejected(self, var, lower, upper):
        window = VariableWindow.for_variable(var, 2.0, 6.0)
        with pytest.raises(ConfigurationError, match="finite"):
            window.set_limits(lower, upper)
        assert window.as_tuple() == (2.0, 6.0)

    def test_recenter_on_nan_leaves_window_unchanged(self, var):
        window = VariableWindow.for_variable(var, 2.0, 6.0)
        with pytest.raises(ConfigurationError):
            window.recenter(math.nan, 1.0)
        assert window.as_tuple() == (2.0, 6.0)
