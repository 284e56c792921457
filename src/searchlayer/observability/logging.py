"""Structured logging configuration using structlog.

Package modules log through ``logging.getLogger(__name__)``. ``setup_logging``
attaches one handler to the ``searchlayer`` logger that renders those records
with structlog, as JSON lines or in console format. The root logger and
other libraries' loggers are left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from searchlayer.config.settings import ObservabilitySettings

LOGGER_NAME = "searchlayer"
HANDLER_NAME = "searchlayer-structlog"


def setup_logging(settings: ObservabilitySettings | None = None) -> logging.Logger:
    """Configure structured logging for the ``searchlayer`` logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        settings: Observability settings. Uses defaults if None.

    Returns:
        The configured ``searchlayer`` logger.
    """
    log_level = settings.log_level.upper() if settings else "INFO"
    log_format = settings.log_format if settings else "json"

    shared_processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer = structlog.dev.ConsoleRenderer() if log_format == "console" else structlog.processors.JSONRenderer()

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *shared_processors,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(LOGGER_NAME)
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, log_level, logging.INFO))
    return logger
