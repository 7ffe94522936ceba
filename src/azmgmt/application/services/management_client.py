"""Facade wiring the request, transport, polling and catalog services together."""

from typing import Any, Optional

from azmgmt.application.services.catalog_service import CatalogService
from azmgmt.application.services.credential_resolver import CredentialResolver
from azmgmt.application.services.operation_poller import OperationPoller
from azmgmt.application.services.request_builder import RequestBuilder
from azmgmt.config.schemas.app_schema import AppConfig
from azmgmt.domain.base.ports.credential_registry_port import CredentialRegistryPort
from azmgmt.domain.base.ports.logging_port import LoggingPort
from azmgmt.domain.credentials import Credentials
from azmgmt.domain.operation import PollOutcome
from azmgmt.domain.request import RequestType
from azmgmt.domain.response import ResponseEnvelope
from azmgmt.infrastructure.adapters.logging_adapter import LoggingAdapter
from azmgmt.infrastructure.cancellation import CancellationToken
from azmgmt.infrastructure.registry.json_registry import JsonCredentialRegistry
from azmgmt.infrastructure.transport.http_transport import HttpTransport


class ManagementClient:
    """Entry point for callers of the management API."""

    def __init__(
        self,
        config: AppConfig,
        resolver: CredentialResolver,
        transport: HttpTransport,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self.config = config
        self._logger = logger or LoggingAdapter("azmgmt.client")
        self._transport = transport
        self.builder = RequestBuilder(resolver, config.management)
        self.poller = OperationPoller(self.builder, transport, config.polling, self._logger)
        self.catalog = CatalogService(
            self.builder, transport, config.management.namespace, self._logger
        )

    @classmethod
    def from_config(
        cls,
        config: AppConfig,
        registry: Optional[CredentialRegistryPort] = None,
        transport: Optional[HttpTransport] = None,
        logger: Optional[LoggingPort] = None,
    ) -> "ManagementClient":
        """Build a client; the JSON registry from the config is used when none is given."""
        if registry is None and config.credentials.registry_file is not None:
            registry = JsonCredentialRegistry(config.credentials.registry_file, logger)
        resolver = CredentialResolver.from_config(config.credentials, registry, logger)
        transport = transport or HttpTransport(config.management, logger)
        return cls(config, resolver, transport, logger)

    def request(
        self,
        method: RequestType,
        uri_template: str,
        *args: Any,
        payload: Optional[str] = None,
        credentials: Optional[Credentials] = None,
    ) -> ResponseEnvelope:
        """Send one request; error statuses come back as envelopes, not exceptions."""
        return self._transport.send(
            self.builder.build(method, payload, uri_template, *args, credentials=credentials)
        )

    def wait_for_completion(
        self,
        operation_id: str,
        cancellation: Optional[CancellationToken] = None,
        credentials: Optional[Credentials] = None,
    ) -> PollOutcome:
        return self.poller.wait_for_completion(operation_id, cancellation, credentials)

    def list_locations(self, credentials: Optional[Credentials] = None) -> dict[str, str]:
        return self.catalog.list_locations(credentials)

    def list_affinity_groups(self, credentials: Optional[Credentials] = None) -> dict[str, str]:
        return self.catalog.list_affinity_groups(credentials)

    def close(self) -> None:
        self._transport.close()

    def __enter__(self) -> "ManagementClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
