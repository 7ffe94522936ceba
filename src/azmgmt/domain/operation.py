"""Outcome of waiting for a long-running operation."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from azmgmt.domain.base.exceptions import ServiceError
from azmgmt.domain.response import ResponseEnvelope


class PollState(str, Enum):
    """States of the operation poll loop. Everything but POLLING is terminal."""

    POLLING = "polling"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    HTTP_ERROR = "http_error"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not PollState.POLLING


@dataclass(frozen=True)
class PollOutcome:
    """Terminal result of one poll invocation."""

    operation_id: str
    state: PollState
    envelope: Optional[ResponseEnvelope] = None
    polls: int = 0
    waits: int = 0

    @property
    def succeeded(self) -> bool:
        return self.state is PollState.SUCCEEDED

    @property
    def service_error(self) -> Optional[ServiceError]:
        """Report for HTTP_ERROR and FAILED outcomes, None otherwise."""
        if self.state not in (PollState.HTTP_ERROR, PollState.FAILED) or self.envelope is None:
            return None
        return ServiceError(
            self.envelope.status_code,
            error_code=self.envelope.error_code,
            error_message=self.envelope.error_message,
            operation_id=self.operation_id,
        )
