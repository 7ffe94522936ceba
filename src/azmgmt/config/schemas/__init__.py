"""Configuration schemas."""

from .app_schema import (
    AppConfig,
    CredentialsConfig,
    LoggingConfig,
    ManagementConfig,
    PollingConfig,
)

__all__: list[str] = [
    "AppConfig",
    "CredentialsConfig",
    "LoggingConfig",
    "ManagementConfig",
    "PollingConfig",
]
