"""Domain exceptions for the management client.

Fatal errors (configuration, transport, parse, cancellation) are raised and end
the current operation. ``ServiceError`` describes a non-success answer from the
service; the transport never raises it, it is attached to the response envelope
and raised only when a caller asks for it.
"""

from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from azmgmt.domain.operation import PollOutcome
    from azmgmt.domain.response import ResponseEnvelope


class ManagementClientError(Exception):
    """Base exception for all management client errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for structured output."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ConfigurationError(ManagementClientError):
    """Raised when no usable configuration or credentials can be resolved."""


class TransportError(ManagementClientError):
    """Raised when no HTTP response could be obtained at all."""

    def __init__(self, message: str, url: Optional[str] = None) -> None:
        super().__init__(message, {"url": url} if url else None)
        self.url = url


class ParseError(ManagementClientError):
    """Raised when a non-empty response body is not well-formed XML.

    The envelope built before parsing is kept so the HTTP status code and
    headers stay available to the caller.
    """

    def __init__(self, message: str, envelope: "ResponseEnvelope") -> None:
        super().__init__(message, {"status_code": envelope.status_code})
        self.envelope = envelope

    @property
    def status_code(self) -> int:
        return self.envelope.status_code


class ServiceError(ManagementClientError):
    """A non-success HTTP status or a failed operation reported by the service."""

    def __init__(
        self,
        status_code: int,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
        operation_id: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.error_code = error_code
        self.error_message = error_message
        self.operation_id = operation_id
        details: dict[str, Any] = {"status_code": status_code}
        if error_code:
            details["error_code"] = error_code
        if error_message:
            details["error_message"] = error_message
        if operation_id:
            details["operation_id"] = operation_id
        super().__init__(self._format(), details)

    def _format(self) -> str:
        text = f"HTTP {self.status_code}"
        if self.operation_id:
            text += f" for operation {self.operation_id}"
        if self.error_code or self.error_message:
            text += f": {self.error_code or 'Error'}"
            if self.error_message:
                text += f" - {self.error_message}"
        return text


class OperationCancelledError(ManagementClientError):
    """Raised when a poll loop is cancelled or its deadline expires while waiting."""

    def __init__(self, outcome: "PollOutcome", reason: str = "cancelled") -> None:
        super().__init__(
            f"Waiting for operation {outcome.operation_id} stopped: {reason}",
            {"operation_id": outcome.operation_id, "reason": reason},
        )
        self.outcome = outcome
        self.reason = reason
