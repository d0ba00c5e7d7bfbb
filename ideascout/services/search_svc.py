from __future__ import annotations

import logging
from typing import Any

import httpx

from ideascout.core.config import GOOGLE_SEARCH_URL, Settings
from ideascout.core.exceptions import ConfigurationError, UpstreamError
from ideascout.services.query_builder import SearchQuery

logger = logging.getLogger(__name__)


class SearchService:
    """Google Custom Search integration returning raw result items."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def ensure_configured(self) -> None:
        """Fail before any query is issued when credentials are missing."""
        if not self.settings.GOOGLE_SEARCH_API_KEY:
            raise ConfigurationError("Google API key is not configured")
        if not self.settings.GOOGLE_SEARCH_CX:
            raise ConfigurationError("Google Search Engine ID is not configured")

    def build_params(self, query: SearchQuery) -> dict[str, Any]:
        return {
            "key": self.settings.GOOGLE_SEARCH_API_KEY,
            "cx": self.settings.GOOGLE_SEARCH_CX,
            "q": query.query,
            "dateRestrict": query.date_restrict,
            "num": query.num,
        }

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull the provider's error message out of a failed response."""
        try:
            payload = response.json()
        except ValueError:
            return "Failed to fetch search results"
        if isinstance(payload, dict):
            error = payload.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return "Failed to fetch search results"

    async def search(self, query: SearchQuery, client: httpx.AsyncClient | None = None) -> list[dict]:
        """Execute one Google custom search and return its raw items."""
        self.ensure_configured()
        params = self.build_params(query)
        logger.debug("Searching: q=%s dateRestrict=%s num=%s", query.query, query.date_restrict, query.num)

        try:
            if client is None:
                async with httpx.AsyncClient(timeout=self.settings.SEARCH_TIMEOUT_SECONDS) as own_client:
                    response = await own_client.get(GOOGLE_SEARCH_URL, params=params)
            else:
                response = await client.get(GOOGLE_SEARCH_URL, params=params)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"Search request failed: {exc}") from exc

        if response.is_error:
            message = self._error_message(response)
            logger.error(
                "Google API Error: status=%s message=%s q=%s",
                response.status_code,
                message,
                query.query,
            )
            raise UpstreamError(message, status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise UpstreamError(f"Search response was not valid JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise UpstreamError("Search response was not a JSON object")
        items = payload.get("items") or []
        if not isinstance(items, list):
            raise UpstreamError("Search response items were not a list")
        hits = [item for item in items if isinstance(item, dict)]
        if len(hits) != len(items):
            logger.warning("Dropped %d non-object search items for q=%s", len(items) - len(hits), query.query)
        return hits
