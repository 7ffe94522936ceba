"""Domain port for credential profile lookup."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from azmgmt.domain.credentials import CredentialProfile


class CredentialRegistryPort(ABC):
    """Registry of named credential profiles grouped by credential kind."""

    @abstractmethod
    def profiles_for(self, kind: str) -> Sequence[CredentialProfile]:
        """Return the profiles registered for ``kind`` in registration order."""
