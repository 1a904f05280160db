"""Structured logging for searchmodel.

Package modules log through stdlib ``logging.getLogger(__name__)``. This
module attaches a handler to the ``searchmodel`` logger that renders those
records through structlog, including any context bound with
``structlog.contextvars`` (the registry binds ``model`` while resolving).
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from searchmodel.config.settings import ObservabilitySettings

PACKAGE_LOGGER = "searchmodel"
HANDLER_NAME = "searchmodel.structlog"


def _shared_processors() -> list:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def setup_logging(settings: ObservabilitySettings | None = None) -> logging.Handler:
    """Render searchmodel log records through structlog.

    Safe to call repeatedly: the handler installed by a previous call is
    replaced.

    Args:
        settings: Observability settings. Uses defaults if None.

    Returns:
        The handler attached to the ``searchmodel`` logger.
    """
    log_level = getattr(settings, "log_level", "info").upper() if settings else "INFO"
    log_format = getattr(settings, "log_format", "json") if settings else "json"

    renderer: list
    if log_format == "console":
        renderer = [structlog.dev.ConsoleRenderer()]
    else:
        renderer = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *renderer],
    )
    handler = logging.StreamHandler(sys.stdout)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, log_level, logging.INFO))
    return handler
