"""CLI command for retrieving citations for a topic."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table
from rich.text import Text

from config.settings import get_settings
from citesearch.retrieval.handler import handle_retrieval_request

console = Console()
app = typer.Typer()

KIND_STYLES = {
    "social_post": "cyan",
    "meeting_note": "magenta",
    "knowledge_document": "green",
}


@app.command()
def retrieve(
    user_id: Annotated[
        str,
        typer.Argument(help="User whose records are searched"),
    ],
    topic: Annotated[
        str,
        typer.Argument(help="Topic of the content being written"),
    ],
    platform: Annotated[
        str | None,
        typer.Option("--platform", "-p", help="Target platform, e.g. linkedin"),
    ] = None,
    max_results: Annotated[
        int | None,
        typer.Option("--max-results", "-n", help="Maximum number of citations"),
    ] = None,
    data: Annotated[
        Path | None,
        typer.Option("--data", help="Search a local JSON records file instead of Supabase"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the raw JSON response"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable verbose logging"),
    ] = False,
):
    """Retrieve ranked citations about TOPIC from USER_ID's collections."""
    if verbose:
        logging.basicConfig(level=logging.INFO)
    else:
        logging.basicConfig(level=logging.WARNING)

    settings = get_settings()
    if data is not None:
        settings.citesearch_store_backend = "memory"
        settings.citesearch_data_path = str(data)

    payload = {"user_id": user_id, "topic": topic, "platform": platform}
    if max_results is not None:
        payload["max_results"] = max_results

    with console.status("[bold green]Searching..."):
        status, body = handle_retrieval_request(payload, settings=settings)

    if status != 200:
        console.print(f"[bold red]Retrieval failed ({status}):[/bold red] {body.get('error')}")
        raise typer.Exit(1)

    if as_json:
        console.print_json(json.dumps(body))
        return

    citations = body["citations"]
    if not citations:
        console.print(f"[yellow]No citations found for[/yellow] {topic!r}")
        return

    table = Table(title=f"Citations for {topic!r}")
    table.add_column("#", justify="right")
    table.add_column("Kind", style="bold", no_wrap=True)
    table.add_column("Score", justify="right", no_wrap=True)
    table.add_column("Title")
    table.add_column("Created")
    table.add_column("Excerpt")

    for i, citation in enumerate(citations, 1):
        kind = citation["kind"]
        table.add_row(
            str(i),
            f"[{KIND_STYLES.get(kind, 'white')}]{kind}[/]",
            f"{citation['relevance_score']:.2f}",
            Text(citation.get("title", "-")),
            citation["created_at"][:10],
            Text(citation["excerpt"]),
        )

    console.print(table)
