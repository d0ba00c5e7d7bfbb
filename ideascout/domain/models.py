from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator
from pydantic.alias_generators import to_camel

from ideascout.core.config import DEFAULT_MAX_RESULTS, DEFAULT_TIME_RANGE, MAX_RESULTS_CAP
from ideascout.domain.catalog import COMMON_HEADS
from ideascout.utils import format_display_date


class CamelModel(BaseModel):
    """Base model exchanging camelCase JSON while keeping snake_case attributes."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Finding(CamelModel):
    """One fully processed search hit."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    head_phrase: str
    tail_phrase: str
    snippet: str
    link: str
    source: str
    date: str = ""
    # 1.0 when the snippet starts with the head phrase
    relevance: float = Field(default=0.0, ge=0.0, le=1.0)

    @computed_field(alias="displayDate")
    @property
    def display_date(self) -> str:
        """``date`` rendered as ``YYYY-MM-DD`` when it parses; the raw value is kept in ``date``."""
        return format_display_date(self.date)


class IdeaCluster(CamelModel):
    """Findings sharing a case-insensitive tail phrase."""

    tail_phrase: str
    count: int
    examples: list[Finding] = Field(default_factory=list)


class MiningRequest(CamelModel):
    time_range: str = DEFAULT_TIME_RANGE
    max_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=1, le=MAX_RESULTS_CAP)
    head_phrases: list[str] = Field(default_factory=lambda: list(COMMON_HEADS))
    sites: list[str] = Field(default_factory=list)

    @field_validator("head_phrases")
    @classmethod
    def reject_blank_heads(cls, v: list[str]) -> list[str]:
        if any(not head.strip() for head in v):
            raise ValueError("head phrases cannot be empty")
        return v

    @field_validator("sites")
    @classmethod
    def strip_sites(cls, v: list[str]) -> list[str]:
        return [site.strip() for site in v if site.strip()]


class MiningResponse(CamelModel):
    results: list[Finding]
    grouped_ideas: list[IdeaCluster]
    total_results: int
    time_range: str
    common_heads: list[str]


class SiteOptionOut(CamelModel):
    id: str
    name: str


class OptionsResponse(CamelModel):
    common_heads: list[str]
    sites: list[SiteOptionOut]
    time_ranges: list[str]
