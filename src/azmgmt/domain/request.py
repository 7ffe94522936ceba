"""Request descriptor sent to the management API."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from azmgmt.domain.credentials import ClientCertificate


class RequestType(str, Enum):
    """HTTP methods used by the management API."""

    GET = "GET"
    POST = "POST"
    DELETE = "DELETE"


@dataclass(frozen=True)
class RequestDescriptor:
    """A fully addressed, authenticated request. Built per call and not retained."""

    method: RequestType
    url: str
    certificate: ClientCertificate
    headers: dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    @property
    def content_length(self) -> int:
        return len(self.body) if self.body is not None else 0
