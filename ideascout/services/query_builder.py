from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from ideascout.core.config import MAX_SITE_FILTERS
from ideascout.core.exceptions import InvalidTimeRange


@dataclass(frozen=True)
class SearchQuery:
    """A provider-ready query for one head phrase."""

    head_phrase: str
    query: str
    date_restrict: str
    num: int


def build_site_filter(sites: Sequence[str]) -> str:
    """Join the first few sites into an ``OR`` clause, or return an empty string."""
    limited_sites = list(sites)[:MAX_SITE_FILTERS]
    if not limited_sites:
        return ""
    return f"({' OR '.join(f'site:{site}' for site in limited_sites)})"


def resolve_date_restrict(time_range: str, time_ranges: Mapping[str, str]) -> str:
    code = time_ranges.get(time_range)
    if not code:
        raise InvalidTimeRange(time_range)
    return code


def build_query(
    head_phrase: str,
    time_range: str,
    max_results: int,
    sites: Sequence[str],
    time_ranges: Mapping[str, str],
) -> SearchQuery:
    """Build the search query and date restriction for a single head phrase."""
    date_restrict = resolve_date_restrict(time_range, time_ranges)
    site_filter = build_site_filter(sites)
    query = f"{head_phrase} {site_filter}" if site_filter else head_phrase
    return SearchQuery(head_phrase=head_phrase, query=query, date_restrict=date_restrict, num=max_results)


def build_queries(
    head_phrases: Sequence[str],
    time_range: str,
    max_results: int,
    sites: Sequence[str],
    time_ranges: Mapping[str, str],
) -> list[SearchQuery]:
    """Build one query per head phrase; the time range is checked before anything else."""
    resolve_date_restrict(time_range, time_ranges)
    return [build_query(head, time_range, max_results, sites, time_ranges) for head in head_phrases]
