"""Configuration loading and schemas."""

from .manager import ConfigurationManager, load_config
from .schemas import AppConfig

__all__: list[str] = ["AppConfig", "ConfigurationManager", "load_config"]
