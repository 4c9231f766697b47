"""Raw source record returned by a record store."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from citesearch.sources.config import SourceConfig


def parse_timestamp(value) -> datetime:
    """Parse a stored timestamp (datetime or ISO-8601 string, 'Z' allowed)."""
    if isinstance(value, datetime):
        return value
    if not value:
        raise ValueError("created_at must not be empty")
    text = str(value)
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)


@dataclass(frozen=True)
class SourceRecord:
    """One row from a user's collection, reduced to the fields retrieval needs."""

    id: str
    text: str
    created_at: datetime
    title: str | None = None
    reference: str | None = None
    metadata: dict = field(default_factory=dict, compare=False)

    @classmethod
    def from_row(cls, row: dict, config: SourceConfig) -> SourceRecord:
        metadata = {
            key: row.get(column)
            for key, column in config.metadata_fields.items()
            if row.get(column) is not None
        }
        return cls(
            id=str(row["id"]),
            text=row.get(config.text_field) or "",
            created_at=parse_timestamp(row.get("created_at")),
            title=config.title_for(row),
            reference=config.reference_for(row),
            metadata=metadata,
        )
