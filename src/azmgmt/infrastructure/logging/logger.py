"""Structured logging setup based on structlog."""

import logging
import os
import sys
from typing import Optional

import structlog

from azmgmt.config.schemas.app_schema import LoggingConfig

_SHARED_PROCESSORS = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.processors.UnicodeDecoder(),
]


def configure_default_logging() -> None:
    """
    Route structlog through stdlib logging without installing any handler.

    Library callers that never call ``setup_logging`` then get stdlib
    behaviour: nothing below WARNING is emitted, warnings reach stderr through
    logging's last-resort handler or whatever handlers the host application set.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def setup_logging(config: Optional[LoggingConfig] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    :param config: Logging configuration; defaults are used when omitted.
    :return: Configured structlog logger for the package.
    """
    config = config or LoggingConfig()

    renderer = (
        structlog.processors.JSONRenderer()
        if config.json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handlers: list[logging.Handler] = []
    if config.destination in ("console", "both"):
        handlers.append(logging.StreamHandler(sys.stderr))
    if config.destination in ("file", "both"):
        log_dir = config.log_dir
        if log_dir is None:
            from azmgmt.config.platform_dirs import get_logs_location

            log_dir = get_logs_location()
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(log_dir, config.log_filename), encoding="utf-8"))

    root = logging.getLogger("azmgmt")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(getattr(logging, config.level, logging.INFO))
    root.propagate = False

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return get_logger("azmgmt")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to ``name``."""
    return structlog.stdlib.get_logger(name)


# Library use before setup_logging() follows stdlib logging
if not structlog.is_configured():
    configure_default_logging()
