"""Per-source configuration for the generic source searcher.

Each collection differs only in table name, text column, selected
columns and how its rows map onto citation metadata. The three
configurations below describe the user's LinkedIn posts, meeting notes
and uploaded knowledge files.
"""

import math
from dataclasses import dataclass, field, replace

from citesearch.models.enums import SourceKind

SOURCE_COUNT = 3
SOCIAL_POST_BOOST = 0.2


@dataclass(frozen=True)
class SourceConfig:
    """Describes how one collection is searched and turned into citations."""

    kind: SourceKind
    collection: str
    text_field: str
    columns: tuple[str, ...]
    term_limit: int
    require_text: bool = False
    score_boost: float = 0.0
    fixed_title: str | None = None
    title_field: str | None = None
    reference_field: str | None = None
    metadata_fields: dict = field(default_factory=dict, compare=False)

    def title_for(self, row: dict) -> str | None:
        if self.fixed_title is not None:
            return self.fixed_title
        if self.title_field is not None:
            return row.get(self.title_field) or None
        return None

    def reference_for(self, row: dict) -> str | None:
        if self.reference_field is None:
            return None
        return row.get(self.reference_field) or None


SOCIAL_POSTS = SourceConfig(
    kind=SourceKind.SOCIAL_POST,
    collection="linkedin_posts",
    text_field="content",
    columns=("id", "content", "created_at", "post_url", "engagement_data"),
    term_limit=2,
    score_boost=SOCIAL_POST_BOOST,
    fixed_title="LinkedIn Post",
    reference_field="post_url",
    metadata_fields={"engagement": "engagement_data"},
)

MEETING_NOTES = SourceConfig(
    kind=SourceKind.MEETING_NOTE,
    collection="meeting_notes",
    text_field="content",
    columns=("id", "content", "created_at", "source_type"),
    term_limit=3,
    reference_field="source_type",
    metadata_fields={"source_type": "source_type"},
)

KNOWLEDGE_DOCUMENTS = SourceConfig(
    kind=SourceKind.KNOWLEDGE_DOCUMENT,
    collection="knowledge_files",
    text_field="extracted_content",
    columns=("id", "name", "type", "extracted_content", "created_at", "url"),
    term_limit=3,
    require_text=True,
    title_field="name",
    reference_field="url",
    metadata_fields={"file_type": "type"},
)

DEFAULT_SOURCES = (SOCIAL_POSTS, MEETING_NOTES, KNOWLEDGE_DOCUMENTS)


def per_source_limit(max_results: int) -> int:
    """Row cap for each source query: ceil(max_results / SOURCE_COUNT)."""
    if max_results <= 0:
        return 0
    return math.ceil(max_results / SOURCE_COUNT)


def configure_sources(term_limits: dict[str, int] | None = None) -> tuple[SourceConfig, ...]:
    """Return DEFAULT_SOURCES with term limits overridden by kind value."""
    if not term_limits:
        return DEFAULT_SOURCES
    return tuple(
        replace(source, term_limit=term_limits.get(source.kind.value, source.term_limit))
        for source in DEFAULT_SOURCES
    )
