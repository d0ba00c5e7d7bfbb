"""
Tests for SearchService with respx HTTP mocking.
"""
from __future__ import annotations

import httpx
import pytest
import respx
from httpx import Response

from ideascout.core.config import GOOGLE_SEARCH_URL, Settings
from ideascout.core.exceptions import ConfigurationError, UpstreamError
from ideascout.services.query_builder import SearchQuery
from ideascout.services.search_svc import SearchService


@pytest.fixture
def query() -> SearchQuery:
    return SearchQuery(head_phrase="tired of", query="tired of (site:reddit.com)", date_restrict="m6", num=10)


@pytest.mark.asyncio
@respx.mock
async def test_search_successful_returns_items(search_service, query):
    mock_response = {
        "items": [
            {"title": "Test Result 1", "link": "https://example.com/1", "snippet": "Test snippet 1"},
            {"title": "Test Result 2", "link": "https://example.com/2", "snippet": "Test snippet 2"},
        ]
    }
    respx.get(GOOGLE_SEARCH_URL).mock(return_value=Response(200, json=mock_response))

    results = await search_service.search(query)

    assert len(results) == 2
    assert results[0]["title"] == "Test Result 1"
    assert results[1]["link"] == "https://example.com/2"


@pytest.mark.asyncio
@respx.mock
async def test_search_without_items_returns_empty_list(search_service, query):
    respx.get(GOOGLE_SEARCH_URL).mock(return_value=Response(200, json={"searchInformation": {}}))

    assert await search_service.search(query) == []


@pytest.mark.asyncio
@respx.mock
async def test_search_sends_provider_parameters(search_service, query):
    route = respx.get(GOOGLE_SEARCH_URL).mock(return_value=Response(200, json={"items": []}))

    await search_service.search(query)

    assert route.called
    params = route.calls[0].request.url.params
    assert params["key"] == "test_key"
    assert params["cx"] == "test_cx"
    assert params["q"] == "tired of (site:reddit.com)"
    assert params["dateRestrict"] == "m6"
    assert params["num"] == "10"


@pytest.mark.asyncio
@respx.mock
async def test_search_surfaces_provider_error_message(search_service, query):
    error_body = {"error": {"code": 403, "message": "Daily Limit Exceeded"}}
    respx.get(GOOGLE_SEARCH_URL).mock(return_value=Response(403, json=error_body))

    with pytest.raises(UpstreamError) as exc_info:
        await search_service.search(query)

    assert str(exc_info.value) == "Daily Limit Exceeded"
    assert exc_info.value.status_code == 403


@pytest.mark.asyncio
@respx.mock
async def test_search_non_json_error_uses_generic_message(search_service, query):
    respx.get(GOOGLE_SEARCH_URL).mock(return_value=Response(500, text="Internal Server Error"))

    with pytest.raises(UpstreamError) as exc_info:
        await search_service.search(query)

    assert str(exc_info.value) == "Failed to fetch search results"
    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
@respx.mock
async def test_search_does_not_retry(search_service, query):
    route = respx.get(GOOGLE_SEARCH_URL).mock(return_value=Response(503, json={}))

    with pytest.raises(UpstreamError):
        await search_service.search(query)

    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_search_transport_error_becomes_upstream_error(search_service, query):
    respx.get(GOOGLE_SEARCH_URL).mock(side_effect=httpx.ConnectError("connection refused"))

    with pytest.raises(UpstreamError) as exc_info:
        await search_service.search(query)

    assert "connection refused" in str(exc_info.value)
    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_search_validates_missing_api_key(query):
    service = SearchService(settings=Settings(GOOGLE_SEARCH_CX="test_cx", _env_file=None))
    service.settings.GOOGLE_SEARCH_API_KEY = None

    with pytest.raises(ConfigurationError) as exc_info:
        await service.search(query)

    assert str(exc_info.value) == "Google API key is not configured"


@pytest.mark.asyncio
async def test_search_validates_missing_engine_id(query):
    service = SearchService(settings=Settings(GOOGLE_SEARCH_API_KEY="test_key", GOOGLE_SEARCH_CX="  ", _env_file=None))

    with pytest.raises(ConfigurationError) as exc_info:
        await service.search(query)

    assert str(exc_info.value) == "Google Search Engine ID is not configured"


@pytest.mark.asyncio
@respx.mock
@pytest.mark.parametrize("body", [["x"], "just text", 42])
async def test_search_non_object_body_raises_upstream_error(search_service, query, body):
    respx.get(GOOGLE_SEARCH_URL).mock(return_value=Response(200, json=body))

    with pytest.raises(UpstreamError) as exc_info:
        await search_service.search(query)

    assert str(exc_info.value) == "Search response was not a JSON object"


@pytest.mark.asyncio
@respx.mock
async def test_search_items_must_be_a_list(search_service, query):
    respx.get(GOOGLE_SEARCH_URL).mock(return_value=Response(200, json={"items": {"title": "odd"}}))

    with pytest.raises(UpstreamError) as exc_info:
        await search_service.search(query)

    assert str(exc_info.value) == "Search response items were not a list"


@pytest.mark.asyncio
@respx.mock
async def test_search_drops_non_object_items(search_service, query):
    items = [{"title": "Kept", "link": "https://example.com/1"}, "stray", None]
    respx.get(GOOGLE_SEARCH_URL).mock(return_value=Response(200, json={"items": items}))

    results = await search_service.search(query)

    assert results == [{"title": "Kept", "link": "https://example.com/1"}]
