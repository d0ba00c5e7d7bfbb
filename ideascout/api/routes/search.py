"""
Idea mining routes.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from ideascout.api.dependencies import get_catalog, get_idea_miner
from ideascout.domain.catalog import Catalog
from ideascout.domain.models import MiningRequest, MiningResponse, OptionsResponse, SiteOptionOut
from ideascout.services.mining_logic import IdeaMiner

router = APIRouter(prefix="/api", tags=["search"])
logger = logging.getLogger(__name__)


@router.post("/search", response_model=MiningResponse)
async def search_ideas(
    request: MiningRequest,
    miner: IdeaMiner = Depends(get_idea_miner),
) -> MiningResponse:
    """
    Mine recurring needs for the selected head phrases.

    Flow:
    1. Check search credentials and the time range (no query on failure)
    2. Query Google once per head phrase, concurrently
    3. Turn every hit into a Finding and group Findings by tail phrase
    """
    return await miner.mine(request)


@router.get("/options", response_model=OptionsResponse)
def get_options(catalog: Catalog = Depends(get_catalog)) -> OptionsResponse:
    """Selectable head phrases, sites and time ranges."""
    return OptionsResponse(
        common_heads=list(catalog.head_phrases),
        sites=[SiteOptionOut(id=site.id, name=site.name) for site in catalog.sites],
        time_ranges=catalog.time_range_keys,
    )
