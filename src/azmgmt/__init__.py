"""azmgmt - Client for the Azure Service Management control plane.

This package talks to the certificate-authenticated, XML based management API:
it builds authenticated requests, parses the XML response envelopes and drives
asynchronous operations to completion by polling their status.

Key Components:
    - domain: Credentials, request/response envelopes, poll outcomes, errors
    - application: Credential resolution, request building, polling, catalog queries
    - infrastructure: HTTP transport, XML parsing, credential registries, logging
    - config: Configuration schema and loading
    - cli: Command-line interface

Usage:
    >>> from azmgmt import ManagementClient
    >>> with ManagementClient.from_config(config) as client:
    ...     envelope = client.request(RequestType.POST, "{0}/services/hostedservices", payload=xml)
    ...     client.wait_for_completion(envelope.request_id)
"""

from azmgmt._package import __version__
from azmgmt.application.services.management_client import ManagementClient
from azmgmt.domain.base.exceptions import (
    ConfigurationError,
    ManagementClientError,
    OperationCancelledError,
    ParseError,
    ServiceError,
    TransportError,
)
from azmgmt.domain.credentials import ClientCertificate, Credentials
from azmgmt.domain.operation import PollOutcome, PollState
from azmgmt.domain.request import RequestType
from azmgmt.domain.response import OperationStatus, ResponseEnvelope
from azmgmt.infrastructure.cancellation import CancellationToken

__all__: list[str] = [
    "CancellationToken",
    "ClientCertificate",
    "ConfigurationError",
    "Credentials",
    "ManagementClient",
    "ManagementClientError",
    "OperationCancelledError",
    "OperationStatus",
    "ParseError",
    "PollOutcome",
    "PollState",
    "RequestType",
    "ResponseEnvelope",
    "ServiceError",
    "TransportError",
    "__version__",
]
