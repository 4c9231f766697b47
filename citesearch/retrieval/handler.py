"""Request handling boundary: validate, retrieve, serialize, map failures."""

import asyncio
import logging

from config.settings import Settings, get_settings
from citesearch.errors import InvalidRequestError, RetrievalError
from citesearch.models.query import RetrievalRequest
from citesearch.retrieval.pipeline import aretrieve_citations
from citesearch.sources.config import configure_sources
from citesearch.sources.store import RecordStore

logger = logging.getLogger(__name__)


async def ahandle_retrieval_request(
    payload: dict,
    store: RecordStore | None = None,
    settings: Settings | None = None,
) -> tuple[int, dict]:
    """Run one retrieval request and return (status_code, response_body).

    400 for a missing or invalid field (no query is issued), 500 when no
    data source can serve the request, 200 otherwise, even with zero
    citations.
    """
    settings = settings or get_settings()

    try:
        request = RetrievalRequest.from_payload(
            payload, default_max_results=settings.citesearch_default_max_results
        )
    except InvalidRequestError as e:
        logger.info("Rejected retrieval request: %s", e)
        return 400, {"error": str(e)}

    try:
        if store is None:
            from citesearch.sources.factory import get_record_store

            store = get_record_store(settings)
        response = await aretrieve_citations(
            request,
            store,
            sources=configure_sources(settings.term_limits),
            dedupe=settings.citesearch_dedupe_citations,
        )
    except (RetrievalError, ValueError) as e:
        logger.error("Retrieval failed for user %s: %s", request.user_id, e)
        return 500, {"error": str(e)}

    return 200, response.to_dict()


def handle_retrieval_request(
    payload: dict,
    store: RecordStore | None = None,
    settings: Settings | None = None,
) -> tuple[int, dict]:
    """Synchronous variant of ahandle_retrieval_request."""
    return asyncio.run(ahandle_retrieval_request(payload, store=store, settings=settings))
