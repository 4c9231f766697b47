"""Merge and rank citations gathered from all sources."""

from collections.abc import Iterable

from citesearch.models.citation import Citation


def dedupe_citations(citations: Iterable[Citation]) -> list[Citation]:
    """Keep one citation per (kind, id), the highest-scoring first seen."""
    best: dict[tuple[str, str], Citation] = {}
    for citation in citations:
        key = (citation.kind.value, citation.id)
        current = best.get(key)
        if current is None or citation.relevance_score > current.relevance_score:
            best[key] = citation
    return list(best.values())


def rank_citations(
    citations: Iterable[Citation],
    max_results: int,
    dedupe: bool = False,
) -> list[Citation]:
    """Sort citations by relevance_score descending and keep the top max_results.

    The sort is stable, so equal scores keep their gathering order.
    """
    if max_results <= 0:
        return []

    pool = dedupe_citations(citations) if dedupe else list(citations)
    ranked = sorted(pool, key=lambda c: c.relevance_score, reverse=True)
    return ranked[:max_results]
