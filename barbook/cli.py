"""Typer based command line entry points for Barbook."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from barbook.config import load_sync_config
from barbook.core.errors import BarbookError, ConfigError
from barbook.core.logger import get_logger
from barbook.services.page_compiler import PageQueryService, sync_books

app = typer.Typer(help="Compile Barbook trivia workbooks into page configuration.")


@app.callback()
def main_callback(
    log_level: str = typer.Option(
        "INFO",
        "--log-level",
        help="Set global logging level (e.g. DEBUG/INFO/WARNING).",
    ),
) -> None:
    """Configure global CLI behaviour before executing commands."""

    logger = get_logger()

    level_value = getattr(logging, log_level.upper(), None)
    if not isinstance(level_value, int):
        raise typer.BadParameter(f"Unknown log level: {log_level}")

    logging.getLogger().setLevel(level_value)
    logger.setLevel(level_value)


@app.command("sync")
def cli_sync(
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Books YAML file (defaults to the packaged books.yaml)",
        resolve_path=True,
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Override the generated artifact path", resolve_path=True
    ),
    report_dir: Optional[Path] = typer.Option(
        None, "--report-dir", help="Directory for the Markdown report and warnings CSV", resolve_path=True
    ),
) -> None:
    """Read every configured workbook and regenerate the page configuration module."""

    logger = get_logger()

    try:
        sync_config = load_sync_config(config)
    except ConfigError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc

    result = sync_books(sync_config, output_path=output, report_dir=report_dir)

    for book_id, count in result.page_counts.items():
        typer.echo(f"Generated {count} pages for [{book_id}]")
    for book_id in result.skipped_books:
        typer.echo(f"Skipped [{book_id}]")
    typer.echo(f"Artifact: {result.artifact_path}")
    if result.report_path:
        typer.echo(f"Report: {result.report_path}")
    if result.warning_count:
        typer.secho(
            f"{result.warning_count} warning(s) above - review before committing.",
            fg=typer.colors.YELLOW,
        )
    logger.info("CLI sync completed: artifact=%s", result.artifact_path)


@app.command("show-page")
def cli_show_page(
    artifact: Path = typer.Option(
        ..., "--artifact", "-a", help="Generated page configuration module", exists=True, dir_okay=False
    ),
    book: Optional[str] = typer.Option(None, "--book", "-b", help="Book id (defaults to the default book)"),
    page: int = typer.Option(..., "--page", "-p", help="1-based page number"),
) -> None:
    """Print the configuration of one page as JSON."""

    try:
        service = PageQueryService.from_artifact(artifact)
        book_id = book or service.registry.default_book
        if book_id is None:
            raise typer.BadParameter("artifact has no default book; pass --book", param_hint="--book")
        catalog = service.registry.book(book_id)
    except BarbookError as exc:
        typer.secho(str(exc), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1) from exc

    if not catalog.page_exists(page):
        typer.secho(
            f"Page {page} is outside 1..{catalog.total_pages} for [{book_id}]",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    typer.echo(catalog.get_page_configuration(page).model_dump_json(indent=2))


if __name__ == "__main__":
    app()
