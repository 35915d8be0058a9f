import logging

import pytest

from randshrink.core.errors import ConfigurationError
from randshrink.core.variable import Variable
from randshrink.utils import configure_logging, ensure_variables, get_logger


def test_ensure_variables_preserves_order():
    a = Variable(name="a", lower_limit=0.0, upper_limit=1.0, initial_value=0.0)
    b = Variable(name="b", lower_limit=0.0, upper_limit=1.0, initial_value=0.0)
    assert ensure_variables(iter([b, a])) == [b, a]


def test_ensure_variables_rejects_empty():
    with pytest.raises(ConfigurationError):
        ensure_variables([])


@pytest.fixture
def package_logger():
    logger = logging.getLogger("randshrink")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestLogging:
    """Package logger configuration for scripts."""

    def test_get_logger_returns_child_that_propagates(self, package_logger):
        logger = get_logger("tests")
        again = get_logger("tests")

        assert logger is again
        assert logger.name == "randshrink.tests"
        assert logger.handlers == []
        assert logger.propagate
        assert len(package_logger.handlers) >= 1

    def test_configure_logging_attaches_one_handler(self, package_logger):
        configure_logging()
        count = len(package_logger.handlers)
        configure_logging("debug")

        assert len(package_logger.handlers) == count
        assert package_logger.level == logging.DEBUG

    def test_get_logger_level_sets_package_level(self, package_logger):
        get_logger("tests", level=logging.WARNING)
        assert package_logger.level == logging.WARNING
        assert get_logger() is package_logger

    def test_unknown_level_name_is_a_configuration_error(self, package_logger):
        with pytest.raises(ConfigurationError, match="Unknown log level"):
            configure_logging("chatty")
