"""
Shared fixtures: a fake FRED API behind httpx.MockTransport.

No test in this suite opens a socket.  FakeFred records every request the
client sends and answers with whatever status/body (or exception) the test
configured.
"""

from typing import Any, Optional

import httpx
import pytest

from fred_core.fred_client import FredClient
from fred_core.registry import build_registry
from fred_tools.dispatcher import Dispatcher

API_KEY = "test-api-key"


class FakeFred:
    """Records requests and replies with a canned response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.json_body: Any = {"seriess": [], "observations": []}
        self.error: Optional[Exception] = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.status_code >= 400:
            return httpx.Response(self.status_code)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_params(self) -> list[tuple[str, str]]:
        """Decoded query parameters of the last request, in order."""
        return list(self.last_request.url.params.multi_items())


@pytest.fixture
def fake_fred() -> FakeFred:
    return FakeFred()


@pytest.fixture
def fred_client(fake_fred: FakeFred) -> FredClient:
    return FredClient(API_KEY, transport=fake_fred.transport)


@pytest.fixture
def dispatcher(fred_client: FredClient) -> Dispatcher:
    return Dispatcher(build_registry(fred_client))
