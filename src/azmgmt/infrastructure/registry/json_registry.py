"""Credential registry backed by a JSON file."""

import json
import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from azmgmt.domain.base.exceptions import ConfigurationError
from azmgmt.domain.base.ports.credential_registry_port import CredentialRegistryPort
from azmgmt.domain.base.ports.logging_port import LoggingPort
from azmgmt.domain.credentials import (
    ClientCertificate,
    CredentialProfile,
    Credentials,
    CredentialSource,
)
from azmgmt.infrastructure.adapters.logging_adapter import LoggingAdapter


class JsonCredentialRegistry(CredentialRegistryPort):
    """
    Reads credential profiles from a JSON file of the form::

        {
          "profiles": [
            {"kind": "azure-management", "name": "prod", "default": true,
             "subscription_id": "...", "certificate_file": "prod.pem",
             "key_file": "prod.key"}
          ]
        }

    Relative certificate paths are resolved against the file's directory.
    The file is read on every lookup so edits are picked up without restart.
    """

    def __init__(self, registry_file: Union[str, Path], logger: Optional[LoggingPort] = None) -> None:
        """
        Initialize JsonCredentialRegistry.

        :param registry_file: Path to the JSON profile file.
        :param logger: Logger; a structlog adapter is used when omitted.
        """
        self.registry_file = Path(registry_file)
        self._logger = logger or LoggingAdapter(__name__)

    def _load_data(self) -> list[dict[str, Any]]:
        """
        Load the raw profile list. A missing file means no profiles.

        :return: The profile entries in file order.
        :raises ConfigurationError: If the file is not valid JSON or has the wrong shape.
        """
        if not os.path.exists(self.registry_file):
            self._logger.debug("Credential registry file %s not found", self.registry_file)
            return []

        try:
            with open(self.registry_file, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in credential registry {self.registry_file}: {e}",
                {"registry_file": str(self.registry_file)},
            ) from e

        profiles = data.get("profiles") if isinstance(data, dict) else None
        if not isinstance(profiles, list):
            raise ConfigurationError(
                f"Credential registry {self.registry_file} must contain a 'profiles' list",
                {"registry_file": str(self.registry_file)},
            )
        return profiles

    def _resolve_path(self, value: Optional[str]) -> Optional[Path]:
        if not value:
            return None
        path = Path(value).expanduser()
        if not path.is_absolute():
            path = self.registry_file.parent / path
        return path

    def _to_profile(self, index: int, entry: dict[str, Any]) -> CredentialProfile:
        name = entry.get("name") or f"profile-{index}"
        try:
            credentials = Credentials(
                subscription_id=entry.get("subscription_id") or "",
                certificate=ClientCertificate(
                    certificate_file=self._resolve_path(entry.get("certificate_file")),
                    key_file=self._resolve_path(entry.get("key_file")),
                ),
                source=CredentialSource.PROFILE,
                profile_name=name,
            )
            # "false" and "0" parse as False; unrecognised strings fail validation
            return CredentialProfile(
                name=name, credentials=credentials, is_default=entry.get("default") or False
            )
        except ValidationError as e:
            raise ConfigurationError(
                f"Credential profile '{name}' in {self.registry_file} is invalid: {e}",
                {"registry_file": str(self.registry_file), "profile": name},
            ) from e

    def profiles_for(self, kind: str) -> Sequence[CredentialProfile]:
        return tuple(
            self._to_profile(index, entry)
            for index, entry in enumerate(self._load_data())
            if isinstance(entry, dict) and entry.get("kind", kind) == kind
        )
