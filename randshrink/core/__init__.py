"""Core primitives.

Low-level value types shared by the search engine and its harness. The
``Problem`` container lives in :mod:`randshrink.core.problem`.
"""

from .errors import ConfigurationError, RunTerminated
from .trial_point import MutableTrialPoint, TrialPoint
from .variable import Variable

__all__ = [
    "ConfigurationError",
    "RunTerminated",
    "MutableTrialPoint",
    "TrialPoint",
    "Variable",
]
