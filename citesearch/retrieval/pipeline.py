"""Retrieval pipeline: terms → per-source searches → citations → ranking.

Each (source, term) query is independent, so all of them are issued
concurrently and joined before the merge step. A failed query is logged
and skipped; the retrieval only fails when every query failed.
"""

import asyncio
import logging
from collections.abc import Sequence

from citesearch.errors import DataSourceUnavailableError
from citesearch.models.citation import Citation
from citesearch.models.query import RetrievalRequest, RetrievalResponse
from citesearch.retrieval.assembler import assemble_citation
from citesearch.retrieval.ranker import rank_citations
from citesearch.retrieval.terms import generate_search_terms
from citesearch.sources.config import DEFAULT_SOURCES, SourceConfig, per_source_limit
from citesearch.sources.searcher import SourceSearcher
from citesearch.sources.store import RecordStore

logger = logging.getLogger(__name__)


async def aretrieve_citations(
    request: RetrievalRequest,
    store: RecordStore,
    sources: Sequence[SourceConfig] = DEFAULT_SOURCES,
    dedupe: bool = False,
) -> RetrievalResponse:
    """Retrieve ranked citations for a request from all configured sources.

    Raises DataSourceUnavailableError if every store query failed.
    """
    if request.max_results <= 0:
        return RetrievalResponse()

    terms = generate_search_terms(request.topic, request.platform)
    limit = per_source_limit(request.max_results)
    searchers = [SourceSearcher(config, store) for config in sources]

    jobs = [
        (searcher, term)
        for searcher in searchers
        for term in searcher.terms_for(terms)
    ]
    logger.info(
        "Retrieving context for user %s, topic %r: %d queries, %d rows per query",
        request.user_id, request.topic, len(jobs), limit,
    )

    outcomes = await asyncio.gather(
        *(
            asyncio.to_thread(searcher.search_term, request.user_id, term, limit)
            for searcher, term in jobs
        ),
        return_exceptions=True,
    )

    citations: list[Citation] = []
    failures = 0
    for (searcher, term), outcome in zip(jobs, outcomes):
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            failures += 1
            logger.warning(
                "%s search failed for term %r: %s",
                searcher.config.collection, term, outcome,
                exc_info=outcome,
            )
            continue
        for record in outcome:
            citations.append(assemble_citation(record, terms, searcher.config))

    if jobs and failures == len(jobs):
        raise DataSourceUnavailableError(
            f"All {failures} record store queries failed; no data source reachable"
        )

    ranked = rank_citations(citations, request.max_results, dedupe=dedupe)
    logger.info("Found %d candidate citations, returning %d", len(citations), len(ranked))
    return RetrievalResponse(citations=tuple(ranked))


def retrieve_citations(
    request: RetrievalRequest,
    store: RecordStore,
    sources: Sequence[SourceConfig] = DEFAULT_SOURCES,
    dedupe: bool = False,
) -> RetrievalResponse:
    """Synchronous entry point around aretrieve_citations."""
    return asyncio.run(aretrieve_citations(request, store, sources=sources, dedupe=dedupe))
