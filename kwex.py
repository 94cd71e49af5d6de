"""kwex CLI: keyword extraction from the command line.

Five commands: extract, proper-nouns, frequent, title, validate.
Uses typer for argument parsing and rich for formatted terminal output.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from extraction.config import ExtractorConfig, load_config
from extraction.errors import InvalidArgumentError
from extraction.session import create_session
from extraction.validator import validate_config

app = typer.Typer(help="kwex: proper-noun, frequency and title keyword extraction.")
console = Console()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging")):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    try:
        return Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        console.print(f"[red]Error: file not found: {path}[/red]")
        raise typer.Exit(code=1)


def _get_config(config_path: str | None) -> ExtractorConfig:
    if config_path is None:
        return ExtractorConfig()
    try:
        return load_config(config_path)
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)


def _print_list(title: str, items: list[str]) -> None:
    table = Table(title=title)
    table.add_column("#", style="dim", width=3)
    table.add_column("Keyword", style="cyan", min_width=20)
    for i, item in enumerate(items, 1):
        table.add_row(str(i), item)
    console.print(table)


# ── extract ─────────────────────────────────────────────────────────


@app.command()
def extract(
    path: str = typer.Argument(..., help="Text file to analyze ('-' for stdin)"),
    title: str = typer.Option("", "--title", help="Article title for extra context"),
    config_path: str = typer.Option(None, "--config", help="Path to config JSON"),
    as_json: bool = typer.Option(False, "--json", help="Print keywords as JSON"),
):
    """Run the full pipeline and print the final keyword list."""
    config = _get_config(config_path)
    session = create_session(_read_text(path), title, config)
    keywords = session.extract_keywords()

    if as_json:
        console.print_json(json.dumps(keywords))
        return

    _print_list("Keywords", keywords)
    mode = "collapse" if config.collapse_subsets else "sort only"
    console.print(f"\n{len(keywords)} keywords (subset pass: {mode})")


# ── proper-nouns ────────────────────────────────────────────────────


@app.command("proper-nouns")
def proper_nouns(
    path: str = typer.Argument(..., help="Text file to analyze ('-' for stdin)"),
    config_path: str = typer.Option(None, "--config", help="Path to config JSON"),
):
    """List proper nouns and multi-word names in order of appearance."""
    session = create_session(_read_text(path), config=_get_config(config_path))
    _print_list("Proper Nouns", session.find_proper_nouns())


# ── frequent ────────────────────────────────────────────────────────


@app.command()
def frequent(
    path: str = typer.Argument(..., help="Text file to analyze ('-' for stdin)"),
    top: int = typer.Option(7, "--top", help="Number of terms to request"),
    config_path: str = typer.Option(None, "--config", help="Path to config JSON"),
):
    """Show the most frequent non-stop terms."""
    session = create_session(_read_text(path), config=_get_config(config_path))
    try:
        ranked = session.find_high_frequency_keywords(top)
    except InvalidArgumentError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(code=1)

    table = Table(title="High-Frequency Terms")
    table.add_column("Term", style="cyan", min_width=20)
    table.add_column("Count", style="green", justify="right")
    for item in ranked:
        table.add_row(item.word, str(item.frequency))
    console.print(table)


# ── title ───────────────────────────────────────────────────────────


@app.command("title")
def title_context(
    text: str = typer.Argument(..., help="Title text"),
    config_path: str = typer.Option(None, "--config", help="Path to config JSON"),
):
    """Extract context terms from a title."""
    session = create_session("", text, _get_config(config_path))
    context = session.find_context_from_title()
    if not context:
        console.print("[yellow]No context terms found.[/yellow]")
        return
    _print_list("Title Context", context)


# ── validate ────────────────────────────────────────────────────────


@app.command()
def validate(config_path: str = typer.Argument(..., help="Path to config JSON")):
    """Check an extractor config for syntactic and semantic errors."""
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
