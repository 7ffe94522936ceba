"""Handlers for the azmgmt CLI actions.

Each handler receives the parsed arguments and a ManagementClient and returns
the process exit code.
"""

from pathlib import Path
from typing import Any

from azmgmt.application.services.management_client import ManagementClient
from azmgmt.cli.console import print_error, print_json, print_success, print_warning
from azmgmt.domain.base.exceptions import OperationCancelledError
from azmgmt.domain.request import RequestType
from azmgmt.domain.response import ResponseEnvelope
from azmgmt.infrastructure.cancellation import CancellationToken


def envelope_to_dict(envelope: ResponseEnvelope) -> dict[str, Any]:
    """Summarize an envelope for JSON output."""
    return {
        "status_code": envelope.status_code,
        "request_id": envelope.request_id,
        "error_code": envelope.error_code,
        "error_message": envelope.error_message,
        "operation_status": envelope.operation_status.value if envelope.operation_status else None,
    }


def handle_locations(args, client: ManagementClient) -> int:
    print_json(client.list_locations())
    return 0


def handle_affinity_groups(args, client: ManagementClient) -> int:
    print_json(client.list_affinity_groups())
    return 0


def handle_request(args, client: ManagementClient) -> int:
    """Send one raw request and print the envelope summary."""
    payload = None
    if args.payload_file:
        payload = Path(args.payload_file).read_text(encoding="utf-8")

    envelope = client.request(RequestType(args.method), args.path, *args.args, payload=payload)
    print_json(envelope_to_dict(envelope))

    error = envelope.service_error
    if error is not None:
        print_error(str(error))
        return 1
    return 0


def handle_wait(args, client: ManagementClient) -> int:
    """Wait for an operation; exit 0 only when it succeeded."""
    timeout = args.timeout if args.timeout is not None else client.config.polling.timeout_seconds
    token = CancellationToken(timeout)
    try:
        outcome = client.wait_for_completion(args.operation_id, token)
    except OperationCancelledError as e:
        print_warning(str(e))
        return 1

    if outcome.succeeded:
        print_success(f"Operation {outcome.operation_id} succeeded")
        return 0

    error = outcome.service_error
    print_error(str(error) if error else f"Operation {outcome.operation_id} ended in {outcome.state.value}")
    return 1
