"""
Tests for FredClient: URL construction and error mapping.
"""

import httpx
import pytest

from fred_core.errors import TransportError, UpstreamError
from fred_core.fred_client import FredClient
from tests.conftest import API_KEY


@pytest.mark.asyncio
async def test_get_json_appends_file_type_and_key_last(fred_client, fake_fred):
    fake_fred.json_body = {"seriess": []}

    body = await fred_client.get_json("series/search", [("search_text", "GDP"), ("limit", "5")])

    assert body == {"seriess": []}
    request = fake_fred.last_request
    assert request.method == "GET"
    assert request.url.host == "api.stlouisfed.org"
    assert request.url.path == "/fred/series/search"
    assert fake_fred.last_params == [
        ("search_text", "GDP"),
        ("limit", "5"),
        ("file_type", "json"),
        ("api_key", API_KEY),
    ]


@pytest.mark.asyncio
async def test_custom_base_url(fake_fred):
    client = FredClient(API_KEY, base_url="http://proxy.local/fred/", transport=fake_fred.transport)

    await client.get_json("/series/observations", [("series_id", "GDP")])

    assert str(fake_fred.last_request.url).startswith("http://proxy.local/fred/series/observations?")


@pytest.mark.asyncio
async def test_non_success_status_raises_upstream_error(fred_client, fake_fred):
    fake_fred.status_code = 503

    with pytest.raises(UpstreamError) as exc_info:
        await fred_client.get_json("series/search", [("search_text", "GDP")])

    assert exc_info.value.status_code == 503
    assert str(exc_info.value) == "Service Unavailable"


@pytest.mark.asyncio
async def test_network_error_raises_transport_error(fred_client, fake_fred):
    fake_fred.error = httpx.ConnectTimeout("timed out")

    with pytest.raises(TransportError, match="timed out"):
        await fred_client.get_json("series/search", [("search_text", "GDP")])


def test_describe_redacts_key(fred_client):
    assert API_KEY not in fred_client.describe()
    assert "***" in fred_client.describe()
