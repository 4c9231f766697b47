"""MCP server exposing citation retrieval over the user's content collections."""

import asyncio
import json
import logging

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from config.settings import get_settings
from citesearch.errors import RetrievalError
from citesearch.retrieval.handler import ahandle_retrieval_request
from citesearch.retrieval.terms import generate_search_terms
from citesearch.sources.store import RecordStore

logger = logging.getLogger(__name__)

server = Server("citesearch")
_store: RecordStore | None = None


def _get_store() -> RecordStore:
    global _store
    if _store is None:
        from citesearch.sources.factory import get_record_store

        _store = get_record_store(get_settings())
    return _store


@server.list_tools()
async def list_tools() -> list[Tool]:
    return [
        Tool(
            name="retrieve_citations",
            description="Find ranked citations about a topic in a user's posts, meeting notes and documents.",
            inputSchema={
                "type": "object",
                "properties": {
                    "user_id": {"type": "string", "description": "Owner of the searched records"},
                    "topic": {"type": "string", "description": "Topic of the content being written"},
                    "platform": {"type": "string", "description": "Target platform, e.g. linkedin"},
                    "max_results": {"type": "integer", "default": 5, "description": "Number of citations"},
                },
                "required": ["user_id", "topic"],
            },
        ),
        Tool(
            name="generate_terms",
            description="Show the search terms derived from a topic.",
            inputSchema={
                "type": "object",
                "properties": {
                    "topic": {"type": "string", "description": "Topic to expand"},
                    "platform": {"type": "string", "description": "Optional target platform"},
                },
                "required": ["topic"],
            },
        ),
    ]


@server.call_tool()
async def call_tool(name: str, arguments: dict) -> list[TextContent]:
    if name == "retrieve_citations":
        return await _handle_retrieve_citations(arguments)
    elif name == "generate_terms":
        return await _handle_generate_terms(arguments)
    else:
        return [TextContent(type="text", text=f"Unknown tool: {name}")]


async def _handle_retrieve_citations(arguments: dict) -> list[TextContent]:
    if not arguments.get("user_id") or not arguments.get("topic"):
        return [TextContent(type="text", text=json.dumps({"error": "user_id and topic are required"}))]

    try:
        store = _get_store()
    except (RetrievalError, ValueError) as e:
        logger.error("Record store unavailable: %s", e)
        return [TextContent(type="text", text=json.dumps({"error": str(e)}))]

    status, body = await ahandle_retrieval_request(arguments, store=store)
    if status != 200:
        logger.warning("retrieve_citations returned %d: %s", status, body.get("error"))
    return [TextContent(type="text", text=json.dumps(body))]


async def _handle_generate_terms(arguments: dict) -> list[TextContent]:
    topic = arguments.get("topic", "")
    if not topic or not topic.strip():
        return [TextContent(type="text", text=json.dumps({"error": "invalid_topic"}))]

    terms = generate_search_terms(topic, arguments.get("platform"))
    return [TextContent(type="text", text=json.dumps({"terms": list(terms)}))]


async def main():
    async with stdio_server() as (read, write):
        await server.run(read, write, server.create_initialization_options())


if __name__ == "__main__":
    asyncio.run(main())
