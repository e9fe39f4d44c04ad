"""Logging utilities for pathconduit.

Every module gets a ``pathconduit.*`` logger with a single stderr handler,
so algorithm diagnostics can be switched on without touching the root
logger of the host application.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import default_log_level

_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# Default logging level, overridable through PATHCONDUIT_LOG_LEVEL
_DEFAULT_LEVEL = default_log_level()

# Module-level logger cache
_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get or create a logger for the given module name.

    Loggers are cached to avoid duplicate handlers. The logger name should
    typically be `__name__` from the calling module.

    Args:
        name: Logger name (typically `__name__`). If None, returns the
            package logger.

    Returns:
        Configured logger instance.

    Example:
        >>> from pathconduit.logging import get_logger
        >>> logger = get_logger(__name__)
        >>> logger.debug("settled %d nodes", 12)
    """
    if name is None:
        name = "pathconduit"

    logger_name = name if name.startswith("pathconduit") else f"pathconduit.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    # Only configure if not already configured (avoid duplicate handlers)
    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(_DEFAULT_LEVEL)
        handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))

        logger.addHandler(handler)
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the logging level for all pathconduit loggers.

    Args:
        level: Logging level (logging.DEBUG, logging.INFO, etc.) or string
            ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL').

    Example:
        >>> import logging
        >>> from pathconduit.logging import set_log_level
        >>> set_log_level(logging.DEBUG)
    """
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    # Update default for new loggers
    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """Configure logging for pathconduit.

    Replaces the handler of every cached logger. It should typically be
    called once at application startup.

    Args:
        level: Logging level (default: WARNING).
        format_string: Custom format string. If None, uses default.
        stream: Output stream (default: sys.stderr).
    """
    level = _coerce_level(level)

    if stream is None:
        stream = sys.stderr

    formatter = logging.Formatter(format_string or _DEFAULT_FORMAT)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        handler = logging.StreamHandler(stream)
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    global _DEFAULT_LEVEL
    _DEFAULT_LEVEL = level
