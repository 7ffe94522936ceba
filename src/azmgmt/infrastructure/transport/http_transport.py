"""HTTPS transport for the management API."""

from typing import Optional

import requests
from requests.structures import CaseInsensitiveDict

from azmgmt.config.schemas.app_schema import ManagementConfig
from azmgmt.domain.base.exceptions import TransportError
from azmgmt.domain.base.ports.logging_port import LoggingPort
from azmgmt.domain.request import RequestDescriptor
from azmgmt.domain.response import ResponseEnvelope
from azmgmt.infrastructure.adapters.logging_adapter import LoggingAdapter
from azmgmt.infrastructure.transport.xml_parser import parse_response


class HttpTransport:
    """Sends request descriptors and returns whatever response the server gives.

    Error statuses are returned as ordinary envelopes; only failures that
    leave no response at all (DNS, connect, TLS, client certificate, timeout)
    raise TransportError.
    """

    def __init__(
        self,
        config: Optional[ManagementConfig] = None,
        logger: Optional[LoggingPort] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self._config = config or ManagementConfig()
        self._logger = logger or LoggingAdapter(__name__)
        self._session = session or requests.Session()
        self._owns_session = session is None

    def send(self, descriptor: RequestDescriptor) -> ResponseEnvelope:
        """Send ``descriptor`` and parse the response into an envelope."""
        self._logger.debug(
            "Sending management API %s request to %s", descriptor.method.value, descriptor.url
        )
        if descriptor.body is not None:
            self._logger.debug("Writing %d bytes of request data", descriptor.content_length)

        try:
            response = self._session.request(
                descriptor.method.value,
                descriptor.url,
                headers=descriptor.headers,
                data=descriptor.body,
                cert=descriptor.certificate.as_requests_cert(),
                timeout=(self._config.connect_timeout, self._config.read_timeout),
                verify=self._config.verify_tls,
            )
        except requests.exceptions.SSLError as e:
            raise TransportError(f"TLS handshake with {descriptor.url} failed: {e}", descriptor.url) from e
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request to {descriptor.url} timed out: {e}", descriptor.url) from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request to {descriptor.url} failed: {e}", descriptor.url) from e
        except OSError as e:
            # requests reports unreadable client certificate files as plain OSError
            raise TransportError(
                f"Client certificate could not be loaded for {descriptor.url}: {e}", descriptor.url
            ) from e

        self._logger.debug(
            "Received HTTP %d from %s (%d bytes)",
            response.status_code,
            descriptor.url,
            len(response.content or b""),
        )
        headers = CaseInsensitiveDict(response.headers)
        if response.content:
            self._logger.debug("Parsing management API XML response")
        envelope = parse_response(
            response.status_code, headers, response.content, self._config.namespace
        )
        return envelope

    def close(self) -> None:
        if self._owns_session:
            self._session.close()
