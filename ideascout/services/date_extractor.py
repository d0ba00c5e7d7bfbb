"""
Best-effort publication date inference for search hits.

Structured page metadata is consulted first; when it carries nothing usable
the snippet text is scanned for a handful of common date layouts. Matches are
returned verbatim, without parsing, and an empty string means "unknown".
"""
from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

METATAG_DATE_KEYS: tuple[str, ...] = (
    "article:published_time",
    "og:updated_time",
    "date",
    "last-modified",
    "datePublished",
    "dateModified",
)

SNIPPET_DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # 14 March 2022 / 3 Mar 2022
    re.compile(r"(\d{1,2}\s+(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\s+\d{4})", re.IGNORECASE),
    # 03/14/2022
    re.compile(r"(\d{1,2}/\d{1,2}/\d{4})"),
    # 2022-03-14
    re.compile(r"(\d{4}-\d{2}-\d{2})"),
)


def date_from_metatags(metatags: Mapping[str, Any] | None) -> str:
    if not metatags:
        return ""
    for key in METATAG_DATE_KEYS:
        value = metatags.get(key)
        if value is None:
            continue
        text = str(value).strip()
        if text:
            return text
    return ""


def date_from_snippet(snippet: str) -> str:
    for pattern in SNIPPET_DATE_PATTERNS:
        match = pattern.search(snippet or "")
        if match:
            return match.group(1)
    return ""


def extract_date(metatags: Mapping[str, Any] | None, snippet: str) -> str:
    """Return the first date found in metadata, then in the snippet, else ``""``."""
    return date_from_metatags(metatags) or date_from_snippet(snippet)
