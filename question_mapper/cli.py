"""
CLI Interface
=============
Command-line interface for the question mapper.

Usage:
    python -m question_mapper analyze <pdf_path>... [options]
    python -m question_mapper serve [options]
    python -m question_mapper info <pdf_path>
"""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .engine import AnalyzerConfig, AnalyzerEngine
from .errors import ExtractionFailure
from .extractor import TextExtractor
from .models import BatchResponse, ErrorResult

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="question-mapper")
def cli():
    """PDF Question Mapper — printed page numbers and question ranges per page."""
    pass


@cli.command()
@click.argument(
    "pdf_paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False),
)
@click.option(
    "--output", "-o",
    default=None,
    help="Also write the JSON results to this file",
)
@click.option(
    "--log-level",
    default="INFO",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    help="Logging level",
)
@click.option(
    "--log-file",
    default=None,
    help="Path to log file",
)
@click.option(
    "--json-output",
    is_flag=True,
    default=False,
    help="Output only JSON results to stdout (for programmatic use)",
)
def analyze(
    pdf_paths: tuple[str, ...],
    output: str,
    log_level: str,
    log_file: str,
    json_output: bool,
):
    """Analyze one or more PDF files."""

    if json_output:
        # Keep stdout clean for the JSON document
        log_level = "ERROR"

    engine = AnalyzerEngine(AnalyzerConfig(log_level=log_level, log_file=log_file))

    documents = [
        (os.path.basename(path), Path(path).read_bytes())
        for path in pdf_paths
    ]

    if not json_output:
        console.print()
        console.print(
            Panel.fit(
                f"[bold cyan]PDF Question Mapper v{__version__}[/]\n"
                f"[dim]Analyzing {len(documents)} file(s)[/]",
                border_style="cyan",
            )
        )
        console.print()

    results = engine.analyze_batch(documents)
    payload = BatchResponse(results=results).model_dump()

    if output:
        Path(output).parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False)

    if json_output:
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for result in results:
            _display_result(result)
        if output:
            console.print(f"[dim]Results saved to: {escape(output)}[/]")

    if all(isinstance(r, ErrorResult) for r in results):
        sys.exit(1)


@cli.command()
@click.option("--host", default="0.0.0.0", help="Server host")
@click.option(
    "--port",
    default=lambda: int(os.environ.get("PORT", 5000)),
    type=int,
    help="Server port",
)
@click.option("--debug", is_flag=True, default=False, help="Debug mode")
def serve(host: str, port: int, debug: bool):
    """Start the HTTP microservice server."""
    from .server import run_server

    console.print()
    console.print(
        Panel.fit(
            f"[bold cyan]PDF Question Mapper API[/]\n"
            f"[dim]Starting on {host}:{port}[/]",
            border_style="cyan",
        )
    )
    console.print()

    run_server(host=host, port=port, debug=debug)


@cli.command()
@click.argument("pdf_path", type=click.Path(exists=True, dir_okay=False))
def info(pdf_path: str):
    """Display PDF file information."""

    data = Path(pdf_path).read_bytes()
    try:
        pdf_info = TextExtractor().get_info(data)
    except ExtractionFailure as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        sys.exit(1)

    console.print()
    table = Table(title="PDF Information", border_style="cyan")
    table.add_column("Property", style="bold")
    table.add_column("Value")

    table.add_row("File", escape(os.path.basename(pdf_path)))
    table.add_row("Pages", str(pdf_info.page_count))
    table.add_row("File Size", f"{len(data) / 1024 / 1024:.2f} MB")

    for key in ["title", "author", "subject", "creator", "producer"]:
        val = pdf_info.metadata.get(key, "")
        if val:
            table.add_row(key.title(), escape(val))

    console.print(table)
    console.print()


# ─── Display Helpers ──────────────────────────────────────────────────────────


def _display_result(result):
    """Display one document's page summary as a rich table."""
    if isinstance(result, ErrorResult):
        console.print(
            f"[red]✗ {escape(result.file_name)}:[/] {escape(result.error)}"
        )
        console.print()
        return

    table = Table(
        title=f"{escape(result.file_name)} ({result.total_pages} pages)",
        border_style="green",
    )
    table.add_column("Page", justify="right", style="bold")
    table.add_column("Printed", justify="right")
    table.add_column("Range", justify="center")
    table.add_column("Question Starts")

    for index, entry in enumerate(result.page_summary, start=1):
        table.add_row(
            str(index),
            str(entry.printed_page),
            entry.range or "[dim]-[/]",
            ", ".join(str(q) for q in entry.question_starts) or "[dim]-[/]",
        )

    console.print(table)
    console.print(
        "[bold]Printed page sequence:[/] "
        + ", ".join(str(n) for n in result.printed_page_sequence)
    )
    console.print()


# ─── Entry point (for python -m question_mapper.cli) ──────────────────────────


if __name__ == "__main__":
    cli()
