"""Citation assembly from a scored, excerpted source record."""

from collections.abc import Sequence

from citesearch.models.citation import Citation
from citesearch.models.record import SourceRecord
from citesearch.retrieval.scoring import MAX_SCORE, score_relevance
from citesearch.retrieval.snippets import extract_snippet
from citesearch.sources.config import SourceConfig


def assemble_citation(record: SourceRecord, terms: Sequence[str], config: SourceConfig) -> Citation:
    """Wrap a record into a Citation with the source's score boost applied.

    Boosted scores are clamped back to MAX_SCORE.
    """
    base_score = score_relevance(record.text, terms)
    relevance_score = min(base_score + config.score_boost, MAX_SCORE)

    return Citation(
        kind=config.kind,
        id=record.id,
        title=record.title,
        excerpt=extract_snippet(record.text, terms),
        created_at=record.created_at,
        relevance_score=relevance_score,
        source_reference=record.reference,
        metadata=record.metadata,
    )
