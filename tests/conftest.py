from __future__ import annotations

import pytest

from ideascout.core.config import Settings
from ideascout.services.search_svc import SearchService


@pytest.fixture
def settings() -> Settings:
    return Settings(GOOGLE_SEARCH_API_KEY="test_key", GOOGLE_SEARCH_CX="test_cx", _env_file=None)


@pytest.fixture
def search_service(settings: Settings) -> SearchService:
    return SearchService(settings=settings)
