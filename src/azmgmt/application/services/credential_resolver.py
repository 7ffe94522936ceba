"""Resolution of the credentials used for a management API call."""

from typing import Optional

from azmgmt.config.schemas.app_schema import DEFAULT_CREDENTIAL_KIND, CredentialsConfig
from azmgmt.domain.base.exceptions import ConfigurationError
from azmgmt.domain.base.ports.credential_registry_port import CredentialRegistryPort
from azmgmt.domain.base.ports.logging_port import LoggingPort
from azmgmt.domain.credentials import (
    ClientCertificate,
    Credentials,
    CredentialSource,
    select_default_profile,
)
from azmgmt.infrastructure.adapters.logging_adapter import LoggingAdapter


class CredentialResolver:
    """Chooses credentials: explicit override, then default profile, then first profile."""

    def __init__(
        self,
        registry: Optional[CredentialRegistryPort] = None,
        kind: str = DEFAULT_CREDENTIAL_KIND,
        override: Optional[Credentials] = None,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self._registry = registry
        self._kind = kind
        self._override = override
        self._logger = logger or LoggingAdapter(__name__)

    @classmethod
    def from_config(
        cls,
        config: CredentialsConfig,
        registry: Optional[CredentialRegistryPort] = None,
        logger: Optional[LoggingPort] = None,
    ) -> "CredentialResolver":
        """Build a resolver whose override comes from the explicit config values."""
        override = None
        if config.has_override:
            override = Credentials(
                subscription_id=config.subscription_id,
                certificate=ClientCertificate(
                    certificate_file=config.certificate_file,
                    key_file=config.key_file,
                ),
                source=CredentialSource.EXPLICIT,
            )
        return cls(registry=registry, kind=config.kind, override=override, logger=logger)

    def resolve(self, override: Optional[Credentials] = None) -> Credentials:
        """
        Resolve the credentials for one call.

        Args:
            override: Per-call credentials that win over everything else

        Returns:
            The resolved credentials

        Raises:
            ConfigurationError: If no override is given and the registry has no profile
        """
        explicit = override or self._override
        if explicit is not None:
            self._logger.debug(
                "Using explicit credentials for subscription %s", explicit.subscription_id
            )
            return explicit

        profiles = self._registry.profiles_for(self._kind) if self._registry is not None else ()
        profile = select_default_profile(profiles)
        if profile is None:
            raise ConfigurationError(
                f"No credentials configured: no explicit credentials and no '{self._kind}' profile found",
                {"kind": self._kind},
            )

        self._logger.debug(
            "Using credential profile %s (default=%s) for subscription %s",
            profile.name,
            profile.is_default,
            profile.credentials.subscription_id,
        )
        credentials = profile.credentials
        if credentials.source is not CredentialSource.PROFILE or credentials.profile_name != profile.name:
            credentials = credentials.model_copy(
                update={"source": CredentialSource.PROFILE, "profile_name": profile.name}
            )
        return credentials
