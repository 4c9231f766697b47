"""Supabase-backed record store for the user's posts, notes and files."""

import logging

from supabase import Client, create_client

from citesearch.errors import DataSourceUnavailableError

logger = logging.getLogger(__name__)


def _ilike_pattern(term: str) -> str:
    """Wrap term for a substring ILIKE match, escaping LIKE wildcards.

    PostgREST rewrites every `*` to `%`, escaped or not, so a `*` is sent
    as the single-character wildcard `_` and matches are re-checked in
    SupabaseRecordStore.search.
    """
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    escaped = escaped.replace("*", "_")
    return f"%{escaped}%"


class SupabaseRecordStore:
    """RecordStore issuing one PostgREST query per search call."""

    def __init__(self, client: Client):
        self._client = client

    @classmethod
    def from_credentials(cls, url: str, service_role_key: str) -> "SupabaseRecordStore":
        if not url or not service_role_key:
            raise DataSourceUnavailableError(
                "SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set to search records"
            )
        return cls(create_client(url, service_role_key))

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

        query = (
            self._client.table(collection)
            .select(", ".join(columns) if columns else "*")
            .eq("user_id", user_id)
        )
        if require_text:
            query = query.not_.is_(text_field, "null").neq(text_field, "")
        result = (
            query.ilike(text_field, _ilike_pattern(term))
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        rows = result.data or []
        if "*" in term:
            needle = term.lower()
            rows = [row for row in rows if needle in str(row.get(text_field) or "").lower()]
        logger.debug("%s: %d rows for term %r", collection, len(rows), term)
        return rows
