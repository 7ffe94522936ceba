"""HTTP transport and XML response parsing."""

from .http_transport import HttpTransport
from .xml_parser import parse_response

__all__: list[str] = ["HttpTransport", "parse_response"]
