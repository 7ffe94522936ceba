"""Polling of asynchronous management operations until they finish."""

from typing import Optional

from azmgmt.application.services.request_builder import RequestBuilder
from azmgmt.config.schemas.app_schema import PollingConfig
from azmgmt.domain.base.exceptions import OperationCancelledError
from azmgmt.domain.base.ports.logging_port import LoggingPort
from azmgmt.domain.credentials import Credentials
from azmgmt.domain.operation import PollOutcome, PollState
from azmgmt.domain.request import RequestType
from azmgmt.domain.response import OperationStatus
from azmgmt.infrastructure.adapters.logging_adapter import LoggingAdapter
from azmgmt.infrastructure.cancellation import CancellationToken
from azmgmt.infrastructure.transport.http_transport import HttpTransport

OPERATION_STATUS_URI = "{0}/operations/{1}"


class OperationPoller:
    """
    Polls an operation's status resource at a fixed interval.

    Each call to ``wait_for_completion`` starts from scratch; nothing is kept
    between calls. A non-200 answer from the status resource ends the loop
    immediately without retry. Cancellation is checked after an InProgress
    answer and during the wait that follows it, never during a request.
    """

    def __init__(
        self,
        builder: RequestBuilder,
        transport: HttpTransport,
        config: Optional[PollingConfig] = None,
        logger: Optional[LoggingPort] = None,
    ) -> None:
        self._builder = builder
        self._transport = transport
        self._config = config or PollingConfig()
        self._logger = logger or LoggingAdapter(__name__)

    def wait_for_completion(
        self,
        operation_id: str,
        cancellation: Optional[CancellationToken] = None,
        credentials: Optional[Credentials] = None,
    ) -> PollOutcome:
        """
        Block until the operation reaches a terminal state.

        Args:
            operation_id: Id returned by the asynchronous call
            cancellation: Token to stop waiting; a token bounded by the
                configured timeout is used when omitted
            credentials: Per-call credentials override

        Returns:
            PollOutcome in state SUCCEEDED, FAILED or HTTP_ERROR

        Raises:
            OperationCancelledError: If the token fires before or during a wait
            TransportError: If the status resource cannot be reached
            ParseError: If the status resource returns malformed XML
        """
        token = cancellation or CancellationToken(self._config.timeout_seconds)
        polls = 0
        waits = 0

        while True:
            envelope = self._transport.send(
                self._builder.build(
                    RequestType.GET, None, OPERATION_STATUS_URI, operation_id, credentials=credentials
                )
            )
            polls += 1

            if envelope.status_code != 200:
                self._logger.error(
                    "HTTP error %d waiting for the completion of operation %s",
                    envelope.status_code,
                    operation_id,
                )
                return PollOutcome(operation_id, PollState.HTTP_ERROR, envelope, polls, waits)

            status = envelope.operation_status
            if status is OperationStatus.IN_PROGRESS:
                self._logger.debug(
                    "Operation %s still in progress, checking again in %.1fs",
                    operation_id,
                    self._config.interval_seconds,
                )
                stopped = token.should_stop
                if not stopped:
                    waits += 1
                    stopped = token.wait(self._config.interval_seconds)
                if stopped:
                    reason = token.reason or "cancelled"
                    self._logger.warning(
                        "Stopped waiting for operation %s: %s", operation_id, reason
                    )
                    raise OperationCancelledError(
                        PollOutcome(operation_id, PollState.CANCELLED, envelope, polls, waits),
                        reason,
                    )
                continue

            if status is OperationStatus.SUCCEEDED:
                self._logger.info("Finished waiting for operation %s successfully", operation_id)
                return PollOutcome(operation_id, PollState.SUCCEEDED, envelope, polls, waits)

            self._logger.error(
                "Operation %s failed. Error code is %s and message is: %s",
                operation_id,
                envelope.error_code,
                envelope.error_message,
            )
            return PollOutcome(operation_id, PollState.FAILED, envelope, polls, waits)
