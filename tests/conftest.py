"""Global test configuration and fixtures."""

import shutil
import sys
import tempfile
from collections.abc import Generator
from pathlib import Path
from typing import Optional
from unittest.mock import Mock

import pytest
import requests
from requests.structures import CaseInsensitiveDict

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from azmgmt.application.services.credential_resolver import CredentialResolver  # noqa: E402
from azmgmt.application.services.request_builder import RequestBuilder  # noqa: E402
from azmgmt.config.schemas.app_schema import AppConfig, ManagementConfig  # noqa: E402
from azmgmt.domain.credentials import (  # noqa: E402
    ClientCertificate,
    CredentialProfile,
    Credentials,
    CredentialSource,
)
from azmgmt.infrastructure.cancellation import CancellationToken  # noqa: E402
from azmgmt.infrastructure.registry.in_memory_registry import (  # noqa: E402
    InMemoryCredentialRegistry,
)

NS = "http://schemas.microsoft.com/windowsazure"
SUBSCRIPTION_ID = "3f2a9c1e-0000-4d5e-9a7b-000000000001"


def xml_body(inner: str, root: str = "Operation") -> bytes:
    """Wrap ``inner`` in a namespaced root element."""
    return f'<?xml version="1.0" encoding="utf-8"?><{root} xmlns="{NS}">{inner}</{root}>'.encode()


def make_response(
    status_code: int,
    body: bytes = b"",
    headers: Optional[dict[str, str]] = None,
) -> requests.Response:
    """Build a real requests.Response without touching the network."""
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.headers = CaseInsensitiveDict(headers or {})
    return response


class FakeSession:
    """Stand-in for requests.Session returning queued responses and recording calls."""

    def __init__(self, *responses) -> None:
        self._responses = list(responses)
        self.calls: list[dict] = []
        self.closed = False

    def request(self, method, url, **kwargs):
        self.calls.append({"method": method, "url": url, **kwargs})
        item = self._responses.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    def close(self) -> None:
        self.closed = True


class RecordingToken(CancellationToken):
    """Cancellation token whose waits return immediately and are counted."""

    def __init__(self, cancel_on_wait: Optional[int] = None) -> None:
        super().__init__()
        self.wait_calls: list[float] = []
        self._cancel_on_wait = cancel_on_wait

    def wait(self, seconds: float) -> bool:
        self.wait_calls.append(seconds)
        if self._cancel_on_wait is not None and len(self.wait_calls) >= self._cancel_on_wait:
            self.cancel()
            return True
        return False


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(
        subscription_id=SUBSCRIPTION_ID,
        certificate=ClientCertificate(
            certificate_file=Path("/etc/azmgmt/mgmt.pem"),
            key_file=Path("/etc/azmgmt/mgmt.key"),
        ),
        source=CredentialSource.EXPLICIT,
    )


@pytest.fixture
def registry(credentials: Credentials) -> InMemoryCredentialRegistry:
    registry = InMemoryCredentialRegistry()
    registry.register(
        "azure-management",
        CredentialProfile(
            name="main",
            is_default=True,
            credentials=credentials.model_copy(update={"source": CredentialSource.PROFILE}),
        ),
    )
    return registry


@pytest.fixture
def logger() -> Mock:
    return Mock()


@pytest.fixture
def management_config() -> ManagementConfig:
    return ManagementConfig()


@pytest.fixture
def app_config() -> AppConfig:
    return AppConfig()


@pytest.fixture
def builder(registry, management_config, logger) -> RequestBuilder:
    return RequestBuilder(CredentialResolver(registry, logger=logger), management_config)
