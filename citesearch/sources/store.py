"""Record store interface and an in-memory implementation.

A record store answers one question: which of a user's rows in a
collection contain a term in a given text column, newest first, up to a
row cap. `InMemoryRecordStore` serves local JSON fixture data and tests;
`SupabaseRecordStore` (supabase_store.py) serves production data.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

from citesearch.models.record import parse_timestamp

logger = logging.getLogger(__name__)


class RecordStore(Protocol):
    """Read-only, per-user text search over named collections."""

    def search(
        self,
        collection: str,
        user_id: str,
        text_field: str,
        term: str,
        limit: int,
        columns: tuple[str, ...] | None = None,
        require_text: bool = False,
    ) -> list[dict]:
        ...


class InMemoryRecordStore:
    """RecordStore over rows held in memory, keyed by collection name.

    Every row must carry `id`, `user_id` and `created_at`.
    """

    def __init__(self, collections: dict[str, list[dict]] | None = None):
        self._collections: dict[str, list[dict]] = {}
        for name, rows in (collections or {}).items():
            for row in rows:
                self.add(name, row)

    @classmethod
    def from_json(cls, path: str | Path) -> "InMemoryRecordStore":
        """Load collections from a JSON object of `{collection: [rows]}`."""
        path = Path(path)
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"{path} must contain a JSON object of collections")
        store = cls(data)
        logger.info("Loaded %d records from %s", store.count, path)
        return store

    def add(self, collection: str, row: dict) -> None:
        for key in ("id", "user_id", "created_at"):
            if key not in row:
                raise ValueError(f"row in {collection!r} is missing {key!r}")
        self._collections.setdefault(collection, []).append(dict(row))

    def search(
        self,
        collection: str,
        user_id: str,
        text_field: str,
        term: str,
        limit: int,
        columns: tuple[str, ...] | None = None,
        require_text: bool = False,
    ) -> list[dict]:
        if limit <= 0:
            return []

        needle = term.lower()
        matches = []
        for row in self._collections.get(collection, []):
            if row["user_id"] != user_id:
                continue
            text = row.get(text_field)
            if not text:
                # Unset text never matches, and require_text excludes it outright
                continue
            if needle in text.lower():
                matches.append(row)

        matches.sort(key=lambda r: parse_timestamp(r["created_at"]), reverse=True)

        results = []
        for row in matches[:limit]:
            if columns:
                results.append({c: row.get(c) for c in columns})
            else:
                results.append(dict(row))
        return results

    @property
    def count(self) -> int:
        """Return the number of records across all collections."""
        return sum(len(rows) for rows in self._collections.values())
