"""Generic source searcher parameterized by a SourceConfig."""

import logging
from collections.abc import Sequence

from citesearch.models.record import SourceRecord
from citesearch.sources.config import SourceConfig
from citesearch.sources.store import RecordStore

logger = logging.getLogger(__name__)


class SourceSearcher:
    """Searches one collection of a user's records for search terms.

    Only the first `config.term_limit` terms are queried, bounding the
    number of store calls per retrieval.
    """

    def __init__(self, config: SourceConfig, store: RecordStore):
        self._config = config
        self._store = store

    @property
    def config(self) -> SourceConfig:
        return self._config

    def terms_for(self, terms: Sequence[str]) -> list[str]:
        """Return the leading terms this source queries."""
        return list(terms[: max(0, self._config.term_limit)])

    def search_term(self, user_id: str, term: str, limit: int) -> list[SourceRecord]:
        """Run one store query for a single term.

        Store failures propagate; rows that cannot be parsed are logged
        and dropped.
        """
        config = self._config
        rows = self._store.search(
            collection=config.collection,
            user_id=user_id,
            text_field=config.text_field,
            term=term,
            limit=limit,
            columns=config.columns,
            require_text=config.require_text,
        )

        records = []
        for row in rows:
            try:
                record = SourceRecord.from_row(row, config)
            except (KeyError, TypeError, ValueError):
                logger.warning(
                    "Skipping malformed %s row: %r", config.collection, row.get("id"), exc_info=True
                )
                continue
            if config.require_text and not record.text.strip():
                continue
            records.append(record)
        return records

    def search(self, user_id: str, terms: Sequence[str], limit: int) -> list[SourceRecord]:
        """Query each leading term in turn, skipping terms whose query fails."""
        records = []
        for term in self.terms_for(terms):
            try:
                records.extend(self.search_term(user_id, term, limit))
            except Exception:
                logger.warning(
                    "%s search failed for term %r", self._config.collection, term, exc_info=True
                )
                continue
        return records
