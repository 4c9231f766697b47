"""Excerpt selection by local term density."""

import re
from collections.abc import Sequence

from citesearch.retrieval.scoring import count_occurrences

MAX_EXCERPT_LENGTH = 300
DENSITY_WINDOW = 200
LEAD_IN = DENSITY_WINDOW // 2
ELLIPSIS = "..."


def _local_density(text: str, position: int, terms: Sequence[str]) -> int:
    """Total term occurrences within +/- LEAD_IN characters of position."""
    window = text[max(0, position - LEAD_IN):position + LEAD_IN]
    return sum(count_occurrences(window, term) for term in terms)


def best_excerpt_position(text: str, terms: Sequence[str]) -> int:
    """Pick the first-occurrence position with the densest term neighbourhood.

    Returns 0 when no term occurs in the text. Ties keep the earlier term.
    """
    best_position = 0
    best_density = -1
    for term in terms:
        if not term:
            continue
        match = re.search(re.escape(term), text, re.IGNORECASE)
        if match is None:
            continue
        position = match.start()
        density = _local_density(text, position, terms)
        if density > best_density:
            best_position = position
            best_density = density
    return best_position


def extract_snippet(text: str, terms: Sequence[str]) -> str:
    """Return an excerpt of at most MAX_EXCERPT_LENGTH characters of text.

    The excerpt starts LEAD_IN characters before the densest term match
    and is marked with ELLIPSIS on each side where the source text was cut.
    """
    if not text:
        return ""

    position = best_excerpt_position(text, terms)
    start = max(0, position - LEAD_IN)
    end = min(len(text), start + MAX_EXCERPT_LENGTH)

    excerpt = text[start:end]
    if start > 0:
        excerpt = ELLIPSIS + excerpt
    if end < len(text):
        excerpt = excerpt + ELLIPSIS
    return excerpt
