"""Citation data model."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Any

from citesearch.models.enums import SourceKind


@dataclass(frozen=True)
class Citation:
    """A ranked, excerpted reference to one of the user's source records."""

    kind: SourceKind
    id: str
    excerpt: str
    created_at: datetime
    relevance_score: float
    title: str | None = None
    source_reference: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict, compare=False)

    def __post_init__(self):
        if not isinstance(self.kind, SourceKind):
            object.__setattr__(self, "kind", SourceKind(self.kind))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if not 0.0 <= self.relevance_score <= 1.0:
            raise ValueError(f"relevance_score must be between 0.0 and 1.0, got {self.relevance_score}")
        if not self.excerpt:
            raise ValueError("excerpt must not be empty")

    def to_dict(self) -> dict:
        """Serialize to JSON-safe primitives, omitting absent optional fields."""
        data = {
            "kind": self.kind.value,
            "id": self.id,
            "excerpt": self.excerpt,
            "created_at": self.created_at.isoformat(),
            "relevance_score": round(self.relevance_score, 4),
        }
        if self.title is not None:
            data["title"] = self.title
        if self.source_reference is not None:
            data["source_reference"] = self.source_reference
        if self.metadata:
            data["metadata"] = dict(self.metadata)
        return data
