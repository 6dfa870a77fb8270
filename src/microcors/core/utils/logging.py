"""
Structured logging utilities.

Configures stdlib logging and structlog from ``LoggingConfig`` so that
every module can simply call ``structlog.get_logger(__name__)``.
"""

from __future__ import annotations

import logging

import structlog

from microcors.core.config.logging_config import LoggingConfig


def configure_logging(logging_config: LoggingConfig) -> None:
    """
    Configure stdlib logging and route structlog through it.

    Args:
        logging_config: Level, format and optional file path to log to.
    """
    level = getattr(logging, logging_config.level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logging_config.file_path:
        handlers.append(logging.FileHandler(logging_config.file_path))

    logging.basicConfig(
        level=level,
        format=logging_config.format,
        handlers=handlers,
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.KeyValueRenderer(key_order=["event"], sort_keys=True),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

