"""CLI commands for inspecting term generation and scoring locally."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from citesearch.retrieval.scoring import count_occurrences, score_relevance
from citesearch.retrieval.snippets import extract_snippet
from citesearch.retrieval.terms import BUSINESS_TERMS, generate_search_terms

console = Console()
app = typer.Typer()


@app.command()
def terms(
    topic: Annotated[
        str,
        typer.Argument(help="Topic to expand into search terms"),
    ],
    platform: Annotated[
        str | None,
        typer.Option("--platform", "-p", help="Target platform, e.g. linkedin"),
    ] = None,
):
    """Print the search terms derived from TOPIC, in query order."""
    if not topic.strip():
        console.print("[bold red]Topic must not be empty.[/bold red]")
        raise typer.Exit(1)

    for i, term in enumerate(generate_search_terms(topic, platform), 1):
        style = "dim" if term in BUSINESS_TERMS else "bold"
        console.print(f"{i:>2}. ", Text(term, style=style))


@app.command()
def score(
    topic: Annotated[
        str,
        typer.Argument(help="Topic to score the text against"),
    ],
    path: Annotated[
        Path,
        typer.Argument(help="Text file to score", exists=True, dir_okay=False, readable=True),
    ],
    platform: Annotated[
        str | None,
        typer.Option("--platform", "-p", help="Target platform, e.g. linkedin"),
    ] = None,
):
    """Score a local text file against TOPIC and show the chosen excerpt."""
    if not topic.strip():
        console.print("[bold red]Topic must not be empty.[/bold red]")
        raise typer.Exit(1)

    text = path.read_text(encoding="utf-8")
    search_terms = generate_search_terms(topic, platform)

    matched = {t: count_occurrences(text, t) for t in search_terms}
    matched = {t: n for t, n in matched.items() if n}

    console.print(f"[bold]Relevance:[/bold] {score_relevance(text, search_terms):.2f}")
    if matched:
        console.print("[bold]Matches:[/bold] " + ", ".join(f"{t} x{n}" for t, n in matched.items()))
    else:
        console.print("[yellow]No search terms occur in this text.[/yellow]")

    excerpt = extract_snippet(text, search_terms)
    if excerpt:
        console.print(Panel(Text(excerpt), title=path.name, padding=(1, 2)))
