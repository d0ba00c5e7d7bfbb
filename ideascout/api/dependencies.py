from __future__ import annotations

from functools import lru_cache

from ideascout.core.config import Settings, get_settings
from ideascout.domain.catalog import Catalog
from ideascout.services.cluster_svc import ClusterService
from ideascout.services.mining_logic import IdeaMiner
from ideascout.services.search_svc import SearchService


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    return Catalog()


def get_search_service() -> SearchService:
    settings: Settings = get_settings()
    return SearchService(settings)


@lru_cache(maxsize=1)
def get_cluster_service() -> ClusterService:
    return ClusterService()


def get_idea_miner() -> IdeaMiner:
    return IdeaMiner(
        search_service=get_search_service(),
        cluster_service=get_cluster_service(),
        catalog=get_catalog(),
    )
