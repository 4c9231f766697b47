"""citesearch CLI entry point."""

import typer

from citesearch.cli.diagnostics import score, terms
from citesearch.cli.retrieve import retrieve

app = typer.Typer(
    name="citesearch",
    help="Find ranked citations about a topic in a user's posts, meeting notes and documents.",
)

app.command(name="retrieve")(retrieve)
app.command(name="terms")(terms)
app.command(name="score")(score)


if __name__ == "__main__":
    app()
