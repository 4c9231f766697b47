"""Lexical relevance scoring for candidate records."""

from collections.abc import Sequence

TERM_OCCURRENCE_WEIGHT = 0.1
PRIMARY_TERM_BONUS = 0.5
MAX_SCORE = 1.0


def count_occurrences(text: str, term: str) -> int:
    """Count case-insensitive occurrences of term in text, overlaps included."""
    if not term:
        return 0
    haystack = text.lower()
    needle = term.lower()
    count = 0
    pos = haystack.find(needle)
    while pos != -1:
        count += 1
        pos = haystack.find(needle, pos + 1)
    return count


def score_relevance(text: str, terms: Sequence[str]) -> float:
    """Score text against the term set, clamped to [0, 1].

    Each occurrence of each term adds TERM_OCCURRENCE_WEIGHT; containing
    the first (primary) term adds PRIMARY_TERM_BONUS.
    """
    if not text or not terms:
        return 0.0

    score = 0.0
    for term in terms:
        score += count_occurrences(text, term) * TERM_OCCURRENCE_WEIGHT

    primary = terms[0]
    if primary and primary.lower() in text.lower():
        score += PRIMARY_TERM_BONUS

    return max(0.0, min(score, MAX_SCORE))
