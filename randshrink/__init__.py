"""randshrink public interface.

Describe a problem with :class:`Variable` and :class:`Problem`, then either
drive :class:`RandomShrinkSearch` from your own harness or hand an objective to
:class:`Engine`.
"""

from __future__ import annotations

from .core import ConfigurationError, RunTerminated, TrialPoint, Variable
from .core.hints import InitialDelta, InitialDomain
from .core.problem import Problem
from .engine import Engine, EngineConfig, RandomShrinkSearch

__all__ = [
    "ConfigurationError",
    "RunTerminated",
    "TrialPoint",
    "Variable",
    "InitialDelta",
    "InitialDomain",
    "Problem",
    "Engine",
    "EngineConfig",
    "RandomShrinkSearch",
]

__version__ = "0.1.0"
