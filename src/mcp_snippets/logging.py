"""Structured logging helpers for the snippet tool endpoint."""

from __future__ import annotations

import logging
from typing import Union

import structlog

_CONFIGURED = False


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """Configure structlog + stdlib logging once."""
    global _CONFIGURED
    if _CONFIGURED:
        return
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logging.basicConfig(level=level, format="%(message)s")
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
    _CONFIGURED = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger with consistent structure."""
    return structlog.get_logger(name)
