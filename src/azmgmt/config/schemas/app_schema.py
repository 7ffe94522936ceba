"""Application configuration schema."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_ENDPOINT = "https://management.core.windows.net"
DEFAULT_API_VERSION = "2012-03-01"
DEFAULT_NAMESPACE = "http://schemas.microsoft.com/windowsazure"
DEFAULT_CREDENTIAL_KIND = "azure-management"


class ManagementConfig(BaseModel):
    """Management API endpoint and HTTP settings."""

    endpoint: str = Field(DEFAULT_ENDPOINT, description="Base URL of the management API")
    api_version: str = Field(DEFAULT_API_VERSION, description="Value of the x-ms-version header")
    namespace: str = Field(DEFAULT_NAMESPACE, description="XML namespace of response documents")
    connect_timeout: float = Field(10.0, gt=0, description="Connect timeout in seconds")
    read_timeout: float = Field(60.0, gt=0, description="Read timeout in seconds")
    verify_tls: bool = Field(True, description="Verify the server certificate")

    @field_validator("endpoint")
    @classmethod
    def _validate_endpoint(cls, value: str) -> str:
        if not value.startswith("https://"):
            raise ValueError("endpoint must be an https:// URL")
        return value.rstrip("/")


class PollingConfig(BaseModel):
    """Operation polling settings. The interval is constant, there is no backoff."""

    interval_seconds: float = Field(2.0, gt=0, description="Wait between two status polls")
    timeout_seconds: Optional[float] = Field(
        None, gt=0, description="Overall deadline for one wait, unbounded when unset"
    )


class CredentialsConfig(BaseModel):
    """Credential lookup settings and optional explicit override."""

    kind: str = Field(DEFAULT_CREDENTIAL_KIND, description="Credential kind looked up in the registry")
    registry_file: Optional[Path] = Field(None, description="JSON file with credential profiles")
    subscription_id: Optional[str] = Field(None, description="Explicit subscription id")
    certificate_file: Optional[Path] = Field(None, description="Explicit PEM client certificate")
    key_file: Optional[Path] = Field(None, description="Private key for the explicit certificate")

    @model_validator(mode="after")
    def _check_override(self) -> "CredentialsConfig":
        if bool(self.subscription_id) != bool(self.certificate_file):
            raise ValueError(
                "subscription_id and certificate_file must be given together for an explicit override"
            )
        return self

    @property
    def has_override(self) -> bool:
        return bool(self.subscription_id and self.certificate_file)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Log level name")
    destination: str = Field(
        "console", description="Where to send logs: console (stderr), file or both"
    )
    log_dir: Optional[Path] = Field(None, description="Directory for the log file")
    log_filename: str = Field("azmgmt.log", description="Log file name")
    json_format: bool = Field(False, description="Render log lines as JSON")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"unknown log level: {value}")
        return value

    @field_validator("destination")
    @classmethod
    def _validate_destination(cls, value: str) -> str:
        value = value.lower()
        if value not in ("console", "file", "both"):
            raise ValueError("destination must be one of console, file, both")
        return value


class AppConfig(BaseModel):
    """Root configuration object."""

    management: ManagementConfig = Field(default_factory=ManagementConfig)
    polling: PollingConfig = Field(default_factory=PollingConfig)
    credentials: CredentialsConfig = Field(default_factory=CredentialsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
