"""Domain ports implemented by infrastructure adapters."""

from .credential_registry_port import CredentialRegistryPort
from .logging_port import LoggingPort

__all__: list[str] = ["CredentialRegistryPort", "LoggingPort"]
