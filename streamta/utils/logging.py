"""Logging for streamta, built on structlog over stdlib logging.

Indicators never log from update(); only lifecycle events (calculator
creation and reset) are emitted. Output goes to a handler on the
``streamta`` logger, so an embedding application's root handlers are left
alone. Level and renderer ("json" or "console") come from AppConfig.

A stream ID names the feed (usually a symbol) an event belongs to. It is
bound per context with stream_context(), or per calculator through
IndicatorCalculator(stream_id=...).
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from streamta.config import AppConfig

PACKAGE_LOGGER = "streamta"


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(config: AppConfig | None = None) -> None:
    """Route streamta's structlog events to stderr.

    Args:
        config: Source of log_level and log_format. Defaults to AppConfig(),
            which reads STREAMTA_* environment variables.
    """
    cfg = config if config is not None else AppConfig()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(cfg.log_format),
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(cfg.log_level)
    package_logger.propagate = False


@contextmanager
def stream_context(stream_id: str) -> Iterator[None]:
    """Tag every event logged inside the block with ``stream_id``."""
    with structlog.contextvars.bound_contextvars(stream_id=stream_id):
        yield


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structlog logger."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
