from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass

LEADING_NON_ALNUM = re.compile(r"^[^a-zA-Z0-9]+")


@dataclass(frozen=True)
class Decomposition:
    head_phrase: str
    tail_phrase: str


def match_head_phrase(title: str, snippet: str, head_phrases: Sequence[str]) -> str:
    """Return the first head phrase found in the title or snippet.

    Falls back to the first configured phrase when nothing matches.
    """
    if not head_phrases:
        raise ValueError("At least one head phrase is required")
    lower_title = title.lower()
    lower_snippet = snippet.lower()
    for head in head_phrases:
        lower_head = head.lower()
        if lower_head in lower_title or lower_head in lower_snippet:
            return head
    return head_phrases[0]


def extract_tail_phrase(title: str, head_phrase: str) -> str:
    """Remove the head phrase from the title, keeping the remainder's casing."""
    remainder = re.sub(re.escape(head_phrase), "", title, count=1, flags=re.IGNORECASE)
    return LEADING_NON_ALNUM.sub("", remainder).strip()


def decompose(title: str, snippet: str, head_phrases: Sequence[str]) -> Decomposition:
    head = match_head_phrase(title, snippet, head_phrases)
    return Decomposition(head_phrase=head, tail_phrase=extract_tail_phrase(title, head))
