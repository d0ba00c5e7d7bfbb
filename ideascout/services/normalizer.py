from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlparse

from ideascout.core.exceptions import MalformedLink


@dataclass(frozen=True)
class NormalizedHit:
    title: str
    snippet: str
    link: str
    source: str
    metatags: dict[str, Any] = field(default_factory=dict)


def extract_hostname(link: str) -> str:
    """Return the hostname of ``link`` or raise ``MalformedLink``."""
    try:
        parsed = urlparse(link)
        hostname = parsed.hostname
    except ValueError as exc:
        raise MalformedLink(link) from exc
    if not parsed.scheme or not hostname:
        raise MalformedLink(link)
    return hostname


def first_metatags(raw: dict[str, Any]) -> dict[str, Any]:
    """Only the first metatags entry of the pagemap carries page-level dates."""
    pagemap = raw.get("pagemap") or {}
    if not isinstance(pagemap, dict):
        return {}
    metatags = pagemap.get("metatags") or []
    if isinstance(metatags, list) and metatags and isinstance(metatags[0], dict):
        return metatags[0]
    return {}


def normalize_hit(raw: dict[str, Any]) -> NormalizedHit:
    link = raw.get("link") or ""
    return NormalizedHit(
        title=raw.get("title") or "",
        snippet=raw.get("snippet") or "",
        link=link,
        source=extract_hostname(link),
        metatags=first_metatags(raw),
    )
