"""Logging setup for scripts that drive a search.

Library modules log through ``logging.getLogger(__name__)`` and never attach
handlers. Scripts call :func:`configure_logging` once, or :func:`get_logger`
which does it on first use, to see engine progress and, at ``DEBUG``, the
window dumps written by ``ShrinkSearcher.log_search_windows``.
"""

from __future__ import annotations

import logging
from typing import Final

from randshrink.core.errors import ConfigurationError

_PACKAGE_LOGGER: Final = "randshrink"
_FORMAT: Final = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"
_DATE_FORMAT: Final = "%Y-%m-%d %H:%M:%S"
_HANDLER_MARK: Final = "_randshrink_handler"


def _coerce_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ConfigurationError(f"Unknown log level {level!r}")
    return resolved


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the package logger and set its level.

    Repeated calls keep the single handler and only change the level. Child
    loggers such as ``randshrink.engine.engine`` propagate to it.
    """

    logger = logging.getLogger(_PACKAGE_LOGGER)
    if not any(getattr(handler, _HANDLER_MARK, False) for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=_FORMAT, datefmt=_DATE_FORMAT))
        setattr(handler, _HANDLER_MARK, True)
        logger.addHandler(handler)
    logger.setLevel(_coerce_level(level))
    return logger


def get_logger(component: str | None = None, level: int | str | None = None) -> logging.Logger:
    """Return ``randshrink.<component>``, configuring the package logger if needed."""

    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    if level is not None or not package_logger.handlers:
        configure_logging(logging.INFO if level is None else level)
    if not component:
        return package_logger
    return logging.getLogger(f"{_PACKAGE_LOGGER}.{component}")
