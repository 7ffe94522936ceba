"""Credential registry kept in memory."""

from collections.abc import Sequence

from azmgmt.domain.base.ports.credential_registry_port import CredentialRegistryPort
from azmgmt.domain.credentials import CredentialProfile


class InMemoryCredentialRegistry(CredentialRegistryPort):
    """Profiles registered programmatically, kept in registration order per kind."""

    def __init__(self) -> None:
        self._profiles: dict[str, list[CredentialProfile]] = {}

    def register(self, kind: str, profile: CredentialProfile) -> None:
        self._profiles.setdefault(kind, []).append(profile)

    def profiles_for(self, kind: str) -> Sequence[CredentialProfile]:
        return tuple(self._profiles.get(kind, ()))
