"""Structured logging setup."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from ilp_rejections.config import Config


def configure_logging(config: Config) -> None:
    """Configure structlog according to ``config``."""
    renderer = (
        structlog.processors.JSONRenderer()
        if config.log_json
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt='iso'),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(config.log_level.upper())
        ),
        context_class=dict,
        # stdout carries the MCP stdio transport
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def create_logger(component: str) -> Any:
    """Return a lazily configured logger tagged with ``component``."""
    return structlog.get_logger(component=component)
