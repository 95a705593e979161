"""Logging utilities for sptrace.

Loggers live under the ``sptrace.`` namespace, each with a single handler.
Engines log run boundaries only; logging never changes a trace.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_DEFAULT_LEVEL = logging.WARNING
_DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
# None means sys.stderr as it is when the handler is built
_DEFAULT_STREAM: Optional[object] = None

_loggers: dict[str, logging.Logger] = {}


def _coerce_level(level: int | str) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.WARNING)
    return level


def _make_handler() -> logging.Handler:
    handler = logging.StreamHandler(_DEFAULT_STREAM or sys.stderr)
    handler.setLevel(_DEFAULT_LEVEL)
    handler.setFormatter(logging.Formatter(_DEFAULT_FORMAT))
    return handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get or create a cached logger, normally for ``__name__``.

    ``None`` gives the package-level ``sptrace`` logger. New loggers pick up
    the level, format and stream last set by configure_logging.
    """
    if name is None:
        name = "sptrace"

    logger_name = name if name == "sptrace" or name.startswith("sptrace.") else f"sptrace.{name}"

    if logger_name in _loggers:
        return _loggers[logger_name]

    logger = logging.getLogger(logger_name)

    if not logger.handlers:
        logger.setLevel(_DEFAULT_LEVEL)
        logger.addHandler(_make_handler())
        logger.propagate = False

    _loggers[logger_name] = logger
    return logger


def set_log_level(level: int | str) -> None:
    """Set the level of every sptrace logger, current and future."""
    global _DEFAULT_LEVEL
    level = _coerce_level(level)

    for logger in _loggers.values():
        logger.setLevel(level)
        for handler in logger.handlers:
            handler.setLevel(level)

    _DEFAULT_LEVEL = level


def configure_logging(
    level: int | str = logging.WARNING,
    format_string: Optional[str] = None,
    stream: Optional[object] = None,
) -> None:
    """
    Replace the handler of every sptrace logger, current and future.

    format_string=None restores the default format and stream=None writes
    to sys.stderr.
    """
    global _DEFAULT_LEVEL, _DEFAULT_FORMAT, _DEFAULT_STREAM
    _DEFAULT_LEVEL = _coerce_level(level)
    _DEFAULT_FORMAT = format_string or "[%(levelname)s] %(name)s: %(message)s"
    _DEFAULT_STREAM = stream

    for logger in _loggers.values():
        logger.setLevel(_DEFAULT_LEVEL)
        for handler in logger.handlers[:]:
            logger.removeHandler(handler)
        logger.addHandler(_make_handler())
