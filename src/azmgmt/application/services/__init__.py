"""Application services of the management client."""

from .catalog_service import CatalogService
from .credential_resolver import CredentialResolver
from .management_client import ManagementClient
from .operation_poller import OperationPoller
from .request_builder import RequestBuilder

__all__: list[str] = [
    "CatalogService",
    "CredentialResolver",
    "ManagementClient",
    "OperationPoller",
    "RequestBuilder",
]
