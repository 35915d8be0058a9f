"""Utility exports."""

from .logging import configure_logging, get_logger
from .validation import ensure_variables

__all__ = [
    "configure_logging",
    "get_logger",
    "ensure_variables",
]
