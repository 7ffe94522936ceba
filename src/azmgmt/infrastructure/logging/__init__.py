"""Logging infrastructure."""

from .logger import configure_default_logging, get_logger, setup_logging

__all__: list[str] = ["configure_default_logging", "get_logger", "setup_logging"]
