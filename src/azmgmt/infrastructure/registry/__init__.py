"""Credential profile registries."""

from .in_memory_registry import InMemoryCredentialRegistry
from .json_registry import JsonCredentialRegistry

__all__: list[str] = ["InMemoryCredentialRegistry", "JsonCredentialRegistry"]
