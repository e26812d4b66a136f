"""CLI entrypoint using typer."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import structlog
import typer
from rich.console import Console
from rich.table import Table

from job_parser_core.config.settings import Settings
from job_parser_core.constants import JOB_POSTING_FIELDS, TRUNCATION_MARKER
from job_parser_core.exceptions import JobParserError
from job_parser_core.models.job import ExtractionRequest, JobPosting
from job_parser_service.observability import configure_logging
from job_parser_service.parser import JobPostingParser
from job_parser_service.prompts.job_posting import build_job_posting_prompt
from job_parser_service.tools.html_text import TextExtractor
from job_parser_service.tools.page_fetcher import PageFetcher

app = typer.Typer(
    name="job-parser",
    help="Extract structured fields from job postings with an LLM",
)
console = Console()
logger = structlog.get_logger()

VERSION = "0.1.0"


def _load_settings(verbose: bool) -> Settings:
    """Build settings and configure logging."""
    settings = Settings()
    if verbose:
        settings.log_level = "DEBUG"
    configure_logging(settings)
    return settings


def _read_source(content: str | None, file: Path | None) -> str | None:
    """Return inline content, or the file's text when a file is given."""
    if file is not None:
        return file.read_text()
    return content


def render_posting(result: dict[str, Any]) -> Table:
    """Render a parsed posting as a two-column table."""
    posting = JobPosting.model_validate(result)
    table = Table(title="Job Posting", show_header=False)
    table.add_column("Field", style="bold cyan")
    table.add_column("Value")
    for field_name in JOB_POSTING_FIELDS:
        table.add_row(field_name.capitalize(), posting.display_value(field_name))
    if posting.requirements:
        table.add_row("Requirements", posting.display_value("requirements"))
    return table


@app.command()
def parse(
    url: str | None = typer.Option(None, "--url", help="Job posting URL to fetch"),
    content: str | None = typer.Option(None, "--content", help="Raw posting text"),
    file: Path | None = typer.Option(
        None, "--file", help="File containing posting text", exists=True, dir_okay=False
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON object"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Parse a job posting into structured fields."""
    settings = _load_settings(verbose)
    request = ExtractionRequest(url=url, content=_read_source(content, file))

    try:
        result = asyncio.run(JobPostingParser(settings).parse(request))
    except JobParserError as exc:
        logger.error(
            "parse_failed",
            error_type=type(exc).__name__,
            error=exc.message,
            upstream_status=exc.status_code,
        )
        console.print(f"[red]Error:[/red] {exc.message}", style="bold")
        raise typer.Exit(code=1) from exc

    if as_json:
        console.print_json(json.dumps(result))
    else:
        console.print(render_posting(result))


@app.command("extract-text")
def extract_text(
    url: str | None = typer.Option(None, "--url", help="Job posting URL to fetch"),
    file: Path | None = typer.Option(
        None, "--file", help="HTML file to extract from", exists=True, dir_okay=False
    ),
    max_length: int | None = typer.Option(
        None,
        "--max-length",
        min=len(TRUNCATION_MARKER) + 1,
        help="Override the extracted text budget",
    ),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Print the text the LLM would receive for a page, without calling it."""
    settings = _load_settings(verbose)
    if url is None and file is None:
        console.print("[red]Error:[/red] Provide --url or --file", style="bold")
        raise typer.Exit(code=1)

    if file is not None:
        html = file.read_text()
    else:
        fetcher = PageFetcher(timeout=settings.fetch_timeout_seconds)
        try:
            html = asyncio.run(fetcher.fetch(url or ""))
        except JobParserError as exc:
            logger.error("fetch_failed", url=url, error=exc.message)
            console.print(f"[red]Error:[/red] {exc.message}", style="bold")
            raise typer.Exit(code=1) from exc

    budget = max_length if max_length is not None else settings.max_text_length
    extractor = TextExtractor(max_length=budget)
    console.print(extractor.extract(html, url=url), markup=False, highlight=False)


@app.command()
def prompt(
    content: str | None = typer.Option(None, "--content", help="Raw posting text"),
    file: Path | None = typer.Option(
        None, "--file", help="File containing posting text", exists=True, dir_okay=False
    ),
) -> None:
    """Print the prompt that would be sent for the given text."""
    text = _read_source(content, file)
    if not text:
        console.print("[red]Error:[/red] Provide --content or --file", style="bold")
        raise typer.Exit(code=1)
    console.print(build_job_posting_prompt(text), markup=False, highlight=False)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", help="Port"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable debug logging"),
) -> None:
    """Run the HTTP API server."""
    import uvicorn

    from job_parser_service.api.app import create_app

    settings = _load_settings(verbose)
    bind_host = host or settings.host
    bind_port = port or settings.port
    console.print(
        f"[bold green]Server running at[/bold green] http://{bind_host}:{bind_port}"
    )
    uvicorn.run(create_app(settings), host=bind_host, port=bind_port, log_config=None)


@app.command()
def version() -> None:
    """Show version."""
    console.print(f"job-posting-parser v{VERSION}")


if __name__ == "__main__":
    app()
