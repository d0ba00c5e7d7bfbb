from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from typing import Any

import httpx

from ideascout.core.exceptions import MalformedLink
from ideascout.domain.catalog import Catalog
from ideascout.domain.models import Finding, IdeaCluster, MiningRequest, MiningResponse
from ideascout.services.cluster_svc import ClusterService
from ideascout.services.date_extractor import extract_date
from ideascout.services.normalizer import normalize_hit
from ideascout.services.phrase_svc import decompose
from ideascout.services.query_builder import SearchQuery, build_queries
from ideascout.services.relevance_svc import calculate_relevance
from ideascout.services.search_svc import SearchService

logger = logging.getLogger(__name__)


def build_finding(raw: dict[str, Any], head_phrases: Sequence[str]) -> Finding:
    """Turn one raw search hit into a Finding.

    Raises ``MalformedLink`` when the hit has no parseable link.
    """
    hit = normalize_hit(raw)
    decomposition = decompose(hit.title, hit.snippet, head_phrases)
    return Finding(
        head_phrase=decomposition.head_phrase,
        tail_phrase=decomposition.tail_phrase,
        snippet=hit.snippet,
        link=hit.link,
        source=hit.source,
        date=extract_date(hit.metatags, hit.snippet),
        relevance=calculate_relevance(hit.snippet, decomposition.head_phrase),
    )


def process_hits(raw_hits: Sequence[dict[str, Any]], head_phrases: Sequence[str]) -> list[Finding]:
    findings: list[Finding] = []
    for raw in raw_hits:
        try:
            findings.append(build_finding(raw, head_phrases))
        except MalformedLink as exc:
            logger.warning("Skipping search hit with malformed link: %r", exc.link)
    return findings


class IdeaMiner:
    """
    Runs the idea-mining pipeline for one request.

    Queries for every head phrase are issued concurrently and joined
    all-or-nothing; the collected hits are then processed synchronously into
    findings and ranked idea clusters.
    """

    def __init__(
        self,
        search_service: SearchService,
        cluster_service: ClusterService,
        catalog: Catalog,
    ) -> None:
        self.search_service = search_service
        self.cluster_service = cluster_service
        self.catalog = catalog

    async def _fetch_all(self, queries: list[SearchQuery]) -> list[dict[str, Any]]:
        """Fan out every query and flatten the hits once all have completed."""
        async with httpx.AsyncClient(timeout=self.search_service.settings.SEARCH_TIMEOUT_SECONDS) as client:
            tasks = [asyncio.ensure_future(self.search_service.search(query, client=client)) for query in queries]
            try:
                batches = await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                await asyncio.gather(*tasks, return_exceptions=True)
                raise
        return [hit for batch in batches for hit in batch]

    async def mine(self, request: MiningRequest) -> MiningResponse:
        self.search_service.ensure_configured()
        queries = build_queries(
            request.head_phrases,
            request.time_range,
            request.max_results,
            request.sites,
            self.catalog.time_ranges,
        )
        logger.info("Dispatching %d queries (time range %s)", len(queries), request.time_range)

        raw_hits = await self._fetch_all(queries)
        findings = process_hits(raw_hits, request.head_phrases)
        clusters: list[IdeaCluster] = self.cluster_service.cluster_findings(findings)
        logger.info("Mined %d findings into %d idea clusters", len(findings), len(clusters))

        return MiningResponse(
            results=findings,
            grouped_ideas=clusters,
            total_results=len(findings),
            time_range=request.time_range,
            common_heads=list(self.catalog.head_phrases),
        )
