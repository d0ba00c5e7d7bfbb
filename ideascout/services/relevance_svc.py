from __future__ import annotations


def calculate_relevance(snippet: str, head_phrase: str) -> float:
    """Score how early the head phrase appears in the snippet.

    Returns ``1 - position / len(snippet)`` for the first case-insensitive
    occurrence, or 0 when the phrase is absent.
    """
    lower_snippet = snippet.lower()
    lower_head = head_phrase.lower()
    if not lower_head or not lower_snippet:
        return 0.0

    position = lower_snippet.find(lower_head)
    if position < 0:
        return 0.0
    return 1 - position / len(lower_snippet)
