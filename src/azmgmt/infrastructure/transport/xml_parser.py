"""Parsing of management API XML bodies into response envelopes."""

from collections.abc import Mapping
from typing import Optional

from lxml import etree

from azmgmt.config.schemas.app_schema import DEFAULT_NAMESPACE
from azmgmt.domain.base.exceptions import ParseError
from azmgmt.domain.response import OperationStatus, ResponseEnvelope


def _make_parser() -> etree.XMLParser:
    return etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)


def _first_text(document: etree._Element, tag: str) -> Optional[str]:
    for element in document.iter(tag):
        return element.text or ""
    return None


def parse_response(
    status_code: int,
    headers: Mapping[str, str],
    body: Optional[bytes],
    namespace: str = DEFAULT_NAMESPACE,
) -> ResponseEnvelope:
    """
    Build the envelope for one response.

    An empty body gives an envelope with only status and headers set. A body
    that is not well-formed XML raises ParseError, which still carries the
    status and headers.

    :param status_code: HTTP status of the response.
    :param headers: Response headers.
    :param body: Raw response body.
    :param namespace: XML namespace of the management API documents.
    :return: The parsed envelope.
    """
    if not body:
        return ResponseEnvelope(status_code=status_code, headers=headers)

    try:
        root = etree.fromstring(body, parser=_make_parser())
    except etree.XMLSyntaxError as e:
        raise ParseError(
            f"Response body of HTTP {status_code} response is not valid XML: {e}",
            ResponseEnvelope(status_code=status_code, headers=headers),
        ) from e

    ns = f"{{{namespace}}}"
    status_element = root.find(f"{ns}Status")
    operation_status = (
        OperationStatus.parse(status_element.text) if status_element is not None else None
    )

    return ResponseEnvelope(
        status_code=status_code,
        headers=headers,
        document=root,
        error_code=_first_text(root, f"{ns}Code"),
        error_message=_first_text(root, f"{ns}Message"),
        operation_status=operation_status,
    )
