"""structlog configuration for the editing engine."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog

from ..config import get_settings


def _level_number(log_level: str) -> int:
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")
    return level


def setup_logging(log_level: str | None = None, stream: TextIO | None = None):
    """Configure structlog with JSON output.

    *log_level* defaults to ``Settings.log_level`` (``NUMBERFLOW_LOG_LEVEL``). The engine
    emits debug events at degradation points (locale fallback, diff fallback, discarded
    barrel wheels) and one info event per processed edit, each tagged with the
    ``component`` that produced it.
    """
    level = _level_number(log_level or get_settings().log_level)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stdout),
    )


def get_logger(component: str):
    """Lazy logger bound to *component*; picks up whatever :func:`setup_logging` configured."""
    return structlog.get_logger(component=component)
