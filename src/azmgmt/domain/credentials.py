"""Credentials used to authenticate against the management API."""

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CredentialSource(str, Enum):
    """Where a set of credentials came from."""

    EXPLICIT = "explicit"
    PROFILE = "profile"


class ClientCertificate(BaseModel):
    """Client certificate presented during the TLS handshake.

    ``certificate_file`` is a PEM file holding the certificate chain and,
    when ``key_file`` is not given, the private key as well.
    """

    model_config = ConfigDict(frozen=True)

    certificate_file: Path
    key_file: Optional[Path] = None

    def as_requests_cert(self) -> "str | tuple[str, str]":
        """Return the value expected by the ``cert`` argument of requests."""
        if self.key_file is not None:
            return (str(self.certificate_file), str(self.key_file))
        return str(self.certificate_file)


class Credentials(BaseModel):
    """Subscription id plus the certificate that authorizes calls against it."""

    model_config = ConfigDict(frozen=True)

    subscription_id: str = Field(..., min_length=1)
    certificate: ClientCertificate
    source: CredentialSource = CredentialSource.EXPLICIT
    profile_name: Optional[str] = None

    @field_validator("subscription_id")
    @classmethod
    def _strip_subscription_id(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("subscription_id must not be blank")
        return value


class CredentialProfile(BaseModel):
    """A named registry entry; at most one profile per kind should be the default."""

    model_config = ConfigDict(frozen=True)

    name: str
    credentials: Credentials
    is_default: bool = False


def select_default_profile(profiles: Sequence[CredentialProfile]) -> Optional[CredentialProfile]:
    """Pick the profile flagged default, else the first one, else None."""
    for profile in profiles:
        if profile.is_default:
            return profile
    return profiles[0] if profiles else None
