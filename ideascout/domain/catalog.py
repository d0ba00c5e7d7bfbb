from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

# Sentence openers that signal an expressed need.
COMMON_HEADS: tuple[str, ...] = (
    "is there a tool for",
    "how can I automate",
    "what's the best way to",
    "looking for a solution to",
    "need help with",
    "tired of",
    "wish there was a",
    "is there an app that",
)

# Google Custom Search ``dateRestrict`` codes.
TIME_RANGE_CODES: Mapping[str, str] = MappingProxyType(
    {
        "1 week": "w1",
        "1 month": "m1",
        "6 months": "m6",
        "1 year": "y1",
    }
)


@dataclass(frozen=True)
class SiteOption:
    id: str
    name: str


COMMON_SITES: tuple[SiteOption, ...] = (
    SiteOption("reddit.com", "Reddit"),
    SiteOption("quora.com", "Quora"),
    SiteOption("twitter.com", "X (Twitter)"),
    SiteOption("medium.com", "Medium"),
    SiteOption("stackoverflow.com", "Stack Overflow"),
    SiteOption("producthunt.com", "Product Hunt"),
    SiteOption("indiehackers.com", "Indie Hackers"),
    SiteOption("dev.to", "Dev.to"),
)


@dataclass(frozen=True)
class Catalog:
    """Immutable configuration data injected into the mining pipeline."""

    head_phrases: tuple[str, ...] = COMMON_HEADS
    time_ranges: Mapping[str, str] = field(default_factory=lambda: TIME_RANGE_CODES)
    sites: tuple[SiteOption, ...] = COMMON_SITES

    @property
    def time_range_keys(self) -> list[str]:
        return list(self.time_ranges)
