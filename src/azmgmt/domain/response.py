"""Parsed response envelope returned for both success and failure responses."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from azmgmt.domain.base.exceptions import ServiceError

REQUEST_ID_HEADER = "x-ms-request-id"


class OperationStatus(str, Enum):
    """Status values reported by the operation status resource."""

    IN_PROGRESS = "InProgress"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["OperationStatus"]:
        """Match ``value`` case-insensitively; unknown or missing values give None."""
        if value is None:
            return None
        wanted = value.strip().lower()
        for status in cls:
            if status.value.lower() == wanted:
                return status
        return None


@dataclass(frozen=True)
class ResponseEnvelope:
    """Uniform view over one HTTP response from the management API."""

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    document: Optional[Any] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
    operation_status: Optional[OperationStatus] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        value = self.headers.get(name)
        if value is not None:
            return value
        wanted = name.lower()
        for key, item in self.headers.items():
            if key.lower() == wanted:
                return item
        return None

    @property
    def request_id(self) -> Optional[str]:
        """Operation id assigned by the service to asynchronous calls."""
        return self.header(REQUEST_ID_HEADER)

    @property
    def service_error(self) -> Optional[ServiceError]:
        """Describe a non-2xx response as a ServiceError, or None on success."""
        if self.ok:
            return None
        return ServiceError(
            self.status_code,
            error_code=self.error_code,
            error_message=self.error_message,
        )

    def raise_for_service_error(self) -> "ResponseEnvelope":
        """Raise the ServiceError of a non-2xx response; return self otherwise."""
        error = self.service_error
        if error is not None:
            raise error
        return self
