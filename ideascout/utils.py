"""Display formatting for mining results."""
from __future__ import annotations

from dateutil import parser


def format_display_date(raw: str | None) -> str:
    """Render a finding date as ``YYYY-MM-DD`` when it parses, else return it untouched."""
    if not raw or not raw.strip():
        return ""
    try:
        return parser.parse(raw.strip()).date().isoformat()
    except (ValueError, TypeError, OverflowError):
        return raw
