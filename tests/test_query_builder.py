"""
Tests for query construction and time-range resolution.
"""
from __future__ import annotations

import pytest

from ideascout.core.exceptions import InvalidTimeRange, ValidationError
from ideascout.domain.catalog import TIME_RANGE_CODES
from ideascout.services.query_builder import build_queries, build_query, build_site_filter, resolve_date_restrict


@pytest.mark.parametrize(
    ("time_range", "code"),
    [
        ("1 week", "w1"),
        ("1 month", "m1"),
        ("6 months", "m6"),
        ("1 year", "y1"),
    ],
)
def test_resolve_date_restrict_known_ranges(time_range, code):
    assert resolve_date_restrict(time_range, TIME_RANGE_CODES) == code


@pytest.mark.parametrize("time_range", ["", "2 weeks", "1 Week", "m6", "forever"])
def test_resolve_date_restrict_rejects_unknown_ranges(time_range):
    with pytest.raises(InvalidTimeRange) as exc_info:
        resolve_date_restrict(time_range, TIME_RANGE_CODES)

    assert exc_info.value.time_range == time_range
    assert isinstance(exc_info.value, ValidationError)
    assert str(exc_info.value) == "Invalid time range"


def test_build_query_without_sites_uses_head_phrase():
    query = build_query("tired of", "1 month", 10, [], TIME_RANGE_CODES)

    assert query.query == "tired of"
    assert query.date_restrict == "m1"
    assert query.num == 10
    assert query.head_phrase == "tired of"


def test_build_query_limits_site_filter_to_three():
    sites = ["reddit.com", "quora.com", "medium.com", "dev.to", "producthunt.com"]

    query = build_query("is there a tool for", "6 months", 5, sites, TIME_RANGE_CODES)

    assert query.query == "is there a tool for (site:reddit.com OR site:quora.com OR site:medium.com)"
    assert "dev.to" not in query.query
    assert "producthunt.com" not in query.query


def test_build_site_filter_single_site():
    assert build_site_filter(["reddit.com"]) == "(site:reddit.com)"
    assert build_site_filter([]) == ""


def test_build_queries_one_per_head_in_order():
    heads = ["tired of", "need help with", "wish there was a"]

    queries = build_queries(heads, "1 year", 10, ["reddit.com"], TIME_RANGE_CODES)

    assert [query.head_phrase for query in queries] == heads
    assert all(query.date_restrict == "y1" for query in queries)


def test_build_queries_rejects_time_range_even_without_heads():
    with pytest.raises(InvalidTimeRange):
        build_queries([], "3 days", 10, [], TIME_RANGE_CODES)
