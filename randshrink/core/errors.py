"""Exceptions shared by the search core and its harness."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a problem, variable, hint, or config is malformed."""


class RunTerminated(Exception):
    """Signal that the current run has ended while a point was being scored.

    Raised by an :class:`~randshrink.engine.interfaces.AlgorithmRun`. The search
    driver treats it as a normal end of the evaluation cycle.
    """
