"""Tests for XML response parsing."""

import pytest

from azmgmt.domain.base.exceptions import ParseError
from azmgmt.domain.response import OperationStatus
from azmgmt.infrastructure.transport.xml_parser import parse_response
from conftest import xml_body


@pytest.mark.unit
class TestParseResponse:
    """Test extraction of status, error code and error message."""

    @pytest.mark.parametrize("text", ["InProgress", "inprogress", "INPROGRESS"])
    def test_in_progress_status_any_casing(self, text):
        envelope = parse_response(
            200, {}, xml_body(f"<ID>op-1</ID><Status>{text}</Status><HttpStatusCode>200</HttpStatusCode>")
        )

        assert envelope.operation_status is OperationStatus.IN_PROGRESS

    def test_failed_operation_carries_error(self):
        body = xml_body(
            "<ID>op-1</ID><Status>Failed</Status><HttpStatusCode>400</HttpStatusCode>"
            "<Error><Code>BadRequest</Code><Message>The label is invalid.</Message></Error>"
        )

        envelope = parse_response(200, {}, body)

        assert envelope.operation_status is OperationStatus.FAILED
        assert envelope.error_code == "BadRequest"
        assert envelope.error_message == "The label is invalid."

    def test_error_document(self):
        body = xml_body(
            "<Code>ResourceNotFound</Code><Message>The hosted service does not exist.</Message>",
            root="Error",
        )

        envelope = parse_response(404, {"x-ms-request-id": "r-1"}, body)

        assert envelope.status_code == 404
        assert envelope.error_code == "ResourceNotFound"
        assert envelope.error_message == "The hosted service does not exist."
        assert envelope.operation_status is None
        assert envelope.request_id == "r-1"

    def test_first_message_anywhere_in_document(self):
        body = xml_body(
            "<Details><Inner><Message>first</Message></Inner></Details><Message>second</Message>"
        )

        assert parse_response(200, {}, body).error_message == "first"

    def test_elements_outside_namespace_are_ignored(self):
        body = b'<Error xmlns="urn:other"><Code>X</Code><Message>Y</Message></Error>'

        envelope = parse_response(500, {}, body)

        assert envelope.error_code is None
        assert envelope.error_message is None
        assert envelope.document is not None

    def test_status_must_be_root_level(self):
        body = xml_body("<Deployment><Status>Succeeded</Status></Deployment>")

        assert parse_response(200, {}, body).operation_status is None

    def test_unknown_status_is_unset(self):
        body = xml_body("<Status>Suspended</Status>")

        assert parse_response(200, {}, body).operation_status is None

    def test_empty_body_leaves_optional_fields_unset(self):
        envelope = parse_response(202, {"x-ms-request-id": "op-2"}, b"")

        assert envelope.status_code == 202
        assert envelope.document is None
        assert envelope.error_code is None
        assert envelope.error_message is None
        assert envelope.operation_status is None
        assert envelope.request_id == "op-2"

    def test_none_body_is_treated_as_empty(self):
        assert parse_response(200, {}, None).document is None

    def test_malformed_xml_raises_parse_error_with_status(self):
        with pytest.raises(ParseError) as exc_info:
            parse_response(502, {"Content-Type": "text/html"}, b"<html><body>Bad gateway")

        assert exc_info.value.status_code == 502
        assert exc_info.value.envelope.status_code == 502
        assert exc_info.value.envelope.header("content-type") == "text/html"

    def test_custom_namespace(self):
        body = b'<Operation xmlns="urn:custom"><Status>Succeeded</Status></Operation>'

        envelope = parse_response(200, {}, body, namespace="urn:custom")

        assert envelope.operation_status is OperationStatus.SUCCEEDED
