"""
Shared pytest fixtures for the Emby proxy tests.

Provides reusable fixtures for:
- Emby endpoint / API key constants
- Sample /Items response payloads
- A mock EmbyServer for provider route tests

HTTP traffic in client tests is mocked with respx; no live Emby server is
required.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from emby.models import EmbyItem, EmbyResponse
from shared_lib.constants import MediaServerType


EMBY_URL = "http://emby:8096"
API_KEY = "emby-api-key-xyz"


# =============================================================================
# Payload Fixtures
# =============================================================================

@pytest.fixture
def movie_item():
    """
    Raw Emby movie record with extra fields from a Fields= selection.

    Usage:
        def test_parse(movie_item):
            assert movie_item["Id"] == "101"
    """
    return {
        "Id": "101",
        "Name": "Blade Runner",
        "Type": "Movie",
        "ProductionYear": 1982,
        "Overview": "A blade runner must pursue four replicants.",
        "ProviderIds": {"Imdb": "tt0083658"},
    }


@pytest.fixture
def episode_item():
    """Raw Emby episode record."""
    return {
        "Id": "202",
        "Name": "Pilot",
        "Type": "Episode",
        "SeriesName": "Twin Peaks",
        "ParentIndexNumber": 1,
        "IndexNumber": 1,
    }


# =============================================================================
# EmbyServer Mock Fixtures
# =============================================================================

@pytest.fixture
def mock_emby_server():
    """
    Mock EmbyServer for provider route tests.

    Provides:
        - items_service_query_item(): AsyncMock returning an empty EmbyResponse
        - get_index_html(): AsyncMock returning a tiny HTML document
        - get_type(): MediaServerType.EMBY
        - endpoint / api_key attributes

    Usage:
        def test_route(mock_emby_server):
            mock_emby_server.items_service_query_item.return_value = EmbyResponse(...)
    """
    server = MagicMock()
    server.endpoint = EMBY_URL
    server.api_key = API_KEY
    server.get_type.return_value = MediaServerType.EMBY
    server.items_service_query_item = AsyncMock(
        return_value=EmbyResponse(Items=[], TotalRecordCount=0)
    )
    server.get_index_html = AsyncMock(return_value=b"<html><body>Emby</body></html>")
    server.close = AsyncMock()
    return server


@pytest.fixture
def sample_response(movie_item, episode_item):
    """EmbyResponse holding the movie and episode records."""
    return EmbyResponse(
        Items=[EmbyItem.model_validate(movie_item), EmbyItem.model_validate(episode_item)],
        TotalRecordCount=2,
    )
