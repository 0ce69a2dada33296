"""Sift CLI — command-line front end to the TF-IDF search server.

Three commands: run, query, validate.
Uses typer for argument parsing and rich for formatted terminal output.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from engine.config import EngineConfig, load_config, validate_config
from engine.errors import SiftError
from engine.logs import configure_logging
from engine.reader import format_match, read_query, read_search_server
from engine.searcher import SearchServer

app = typer.Typer(help="Sift: in-memory TF-IDF document search with minus-words.")
console = Console()
logger = logging.getLogger("sift")


def _load_config(config_path: str | None) -> EngineConfig:
    try:
        return load_config(config_path)
    except SiftError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)


def _read_corpus(corpus_path: str) -> list[str]:
    """One document per line; a trailing newline does not add a document."""
    text = Path(corpus_path).read_text(encoding="utf-8")
    lines = [line.rstrip("\r") for line in text.split("\n")]
    if lines and lines[-1] == "":
        lines.pop()
    return lines


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    configure_logging(verbose)


# ── run ─────────────────────────────────────────────────────────────


@app.command()
def run(
    config_path: str = typer.Option(None, "--config", help="Path to config JSON"),
):
    """Read stop words, documents and a query from stdin; print the top matches."""
    config = _load_config(config_path)
    try:
        server = read_search_server(sys.stdin, config)
    except SiftError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(code=1)

    query = read_query(sys.stdin)
    for match in server.find_top_documents(query):
        typer.echo(format_match(match))


# ── query ───────────────────────────────────────────────────────────


@app.command()
def query(
    corpus_path: str = typer.Argument(..., help="Text file, one document per line"),
    q: str = typer.Option("", "--q", help="Search query string"),
    stop_words: str = typer.Option("", "--stop-words", help="Space-separated stop words"),
    config_path: str = typer.Option(None, "--config", help="Path to config JSON"),
):
    """Index a corpus file and display ranked results for a query."""
    if not q:
        console.print("[red]Error: --q is required[/red]")
        raise typer.Exit(code=1)
    if not Path(corpus_path).is_file():
        console.print(f"[red]Error: corpus file not found: {escape(corpus_path)}[/red]")
        raise typer.Exit(code=1)

    config = _load_config(config_path)
    server = SearchServer.from_documents(_read_corpus(corpus_path), stop_words, config)
    logger.info("Indexed %d documents, %d unique terms", server.document_count, len(server.index))
    results = server.find_top_documents(q)

    console.print(f'\n[bold]Query:[/bold] "{escape(q)}"')
    console.print(
        f"[bold]Documents:[/bold] {server.document_count} | Top-k: {config.max_results}"
    )
    console.print()

    table = Table()
    table.add_column("#", style="dim", width=3)
    table.add_column("Document", style="cyan", justify="right")
    table.add_column("Relevance", justify="right", width=12)

    for i, match in enumerate(results, 1):
        table.add_row(str(i), str(match.document_id), f"{match.relevance:.6f}")

    console.print(table)
    console.print(f"\n{len(results)} results returned")


# ── validate ────────────────────────────────────────────────────────


@app.command()
def validate(config_path: str = typer.Argument(..., help="Path to config JSON")):
    """Check an engine config for errors."""
    passed, errors = validate_config(config_path)

    if passed:
        console.print(
            Panel("[bold green]✓ Validation passed[/bold green]", border_style="green")
        )
    else:
        console.print(
            Panel("[bold red]✗ Validation failed[/bold red]", border_style="red")
        )
        for err in errors:
            console.print(f"  [red]✗[/red] {err}")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
