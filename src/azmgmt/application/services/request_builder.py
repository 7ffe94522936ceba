"""Construction of authenticated management API requests."""

from typing import Any, Optional

from azmgmt._package import USER_AGENT
from azmgmt.application.services.credential_resolver import CredentialResolver
from azmgmt.config.schemas.app_schema import ManagementConfig
from azmgmt.domain.base.exceptions import ConfigurationError
from azmgmt.domain.credentials import Credentials
from azmgmt.domain.request import RequestDescriptor, RequestType

VERSION_HEADER = "x-ms-version"
XML_CONTENT_TYPE = "application/xml"


class RequestBuilder:
    """Turns a URI template, a method and an optional XML payload into a request."""

    def __init__(self, resolver: CredentialResolver, config: Optional[ManagementConfig] = None) -> None:
        self._resolver = resolver
        self._config = config or ManagementConfig()

    def format_url(self, uri_template: str, subscription_id: str, *args: Any) -> str:
        """Fill ``{0}`` with the subscription id and ``{1}``.. with ``args`` in order.

        Templates that are not absolute https URLs are joined to the endpoint.

        :raises ConfigurationError: If the result is an absolute URL with another scheme.
        """
        path = uri_template.format(subscription_id, *args)
        if path.startswith("https://"):
            return path
        if "://" in path:
            raise ConfigurationError(
                f"Request URL must use https: {path}",
                {"uri_template": uri_template},
            )
        return f"{self._config.endpoint}/{path.lstrip('/')}"

    def build(
        self,
        method: RequestType,
        payload: Optional[str],
        uri_template: str,
        *args: Any,
        credentials: Optional[Credentials] = None,
    ) -> RequestDescriptor:
        """
        Build one request descriptor.

        Args:
            method: HTTP method
            payload: XML document to send, or None
            uri_template: Template whose ``{0}`` is the subscription id
            *args: Values for the remaining positional placeholders
            credentials: Per-call credentials that override resolution

        Returns:
            The request descriptor

        Raises:
            ConfigurationError: If no credentials can be resolved
        """
        resolved = self._resolver.resolve(credentials)
        headers = {
            VERSION_HEADER: self._config.api_version,
            "Content-Type": XML_CONTENT_TYPE,
            "Accept": XML_CONTENT_TYPE,
            "User-Agent": USER_AGENT,
        }
        body = None
        if payload:
            body = payload.encode("utf-8")
            headers["Content-Length"] = str(len(body))

        return RequestDescriptor(
            method=RequestType(method),
            url=self.format_url(uri_template, resolved.subscription_id, *args),
            certificate=resolved.certificate,
            headers=headers,
            body=body,
        )
