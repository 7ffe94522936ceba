"""Read-only catalog queries: locations and affinity groups."""

from typing import Optional

from azmgmt.application.services.request_builder import RequestBuilder
from azmgmt.config.schemas.app_schema import DEFAULT_NAMESPACE
from azmgmt.domain.base.ports.logging_port import LoggingPort
from azmgmt.domain.credentials import Credentials
from azmgmt.domain.request import RequestType
from azmgmt.domain.response import ResponseEnvelope
from azmgmt.infrastructure.adapters.logging_adapter import LoggingAdapter
from azmgmt.infrastructure.transport.http_transport import HttpTransport

LOCATIONS_URI = "{0}/locations"
AFFINITY_GROUPS_URI = "{0}/affinitygroups"


class CatalogService:
    """Lists catalog resources as ``{Name: label}`` mappings.

    A non-200 answer yields an empty mapping, the same value as an empty
    catalog; the failure is logged at warning level with its status and
    error code. A body that is not well-formed XML still raises ParseError,
    whatever the status.
    """

    def __init__(
        self,
        builder: RequestBuilder,
        transport: HttpTransport,
        namespace: str = DEFAULT_NAMESPACE,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self._builder = builder
        self._transport = transport
        self._ns = f"{{{namespace}}}"
        self._logger = logger or LoggingAdapter(__name__)

    def list_locations(self, credentials: Optional[Credentials] = None) -> dict[str, str]:
        """Map location names to display names."""
        return self._list(LOCATIONS_URI, "Location", "DisplayName", credentials)

    def list_affinity_groups(self, credentials: Optional[Credentials] = None) -> dict[str, str]:
        """Map affinity group names to descriptions."""
        return self._list(AFFINITY_GROUPS_URI, "AffinityGroup", "Description", credentials)

    def _list(
        self,
        uri_template: str,
        item_tag: str,
        label_tag: str,
        credentials: Optional[Credentials],
    ) -> dict[str, str]:
        envelope = self._transport.send(
            self._builder.build(RequestType.GET, None, uri_template, credentials=credentials)
        )
        if envelope.status_code != 200:
            self._logger.warning(
                "Listing %s elements failed with HTTP %d (%s), returning no entries",
                item_tag,
                envelope.status_code,
                envelope.error_code or "no error code",
            )
            return {}
        return self._collect(envelope, item_tag, label_tag)

    def _collect(self, envelope: ResponseEnvelope, item_tag: str, label_tag: str) -> dict[str, str]:
        result: dict[str, str] = {}
        if envelope.document is None:
            return result

        for item in envelope.document.iterchildren(f"{self._ns}{item_tag}"):
            name = item.findtext(f"{self._ns}Name")
            if not name:
                self._logger.debug("Skipping %s element without a Name", item_tag)
                continue
            result[name] = item.findtext(f"{self._ns}{label_tag}") or ""
        return result
