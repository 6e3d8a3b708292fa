"""Pytest configuration and fixtures for Live Search client tests."""

import itertools
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from livesearch.client import LiveSearchClient
from livesearch.models import StoreIdentity
from livesearch.telemetry import TelemetrySink


@pytest.fixture
def identity() -> StoreIdentity:
    """Create a store identity."""
    return StoreIdentity(
        environment_id="env-123",
        website_code="base",
        store_code="main_website_store",
        store_view_code="default",
        api_key="search_gql",
    )


@pytest.fixture
def mock_sink() -> MagicMock:
    """Create a mock telemetry sink."""
    return MagicMock(spec=TelemetrySink)


@pytest.fixture
def client(identity: StoreIdentity, mock_sink: MagicMock) -> LiveSearchClient:
    """Create a client with deterministic identifiers."""
    counter = itertools.count(1)
    return LiveSearchClient(
        api_url="https://search.example.com/graphql",
        identity=identity,
        sink=mock_sink,
        id_factory=lambda: f"id-{next(counter)}",
    )


def _response(payload: Any, status_code: int = 200) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


@pytest.fixture
def make_response():
    """Factory for mock HTTP responses whose body decodes to a payload."""
    return _response


@pytest.fixture
def mock_http(client: LiveSearchClient):
    """Patch the client's HTTP client; yields the mock httpx client."""
    with patch.object(
        client, "_get_client", new_callable=AsyncMock
    ) as mock_get_client:
        mock_http_client = AsyncMock()
        mock_http_client.request = AsyncMock(return_value=_response({"data": {}}))
        mock_get_client.return_value = mock_http_client
        yield mock_http_client
