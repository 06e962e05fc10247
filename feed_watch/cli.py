"""
Command-line interface for feed-watch.

Uses Typer to provide a CLI with options for the main configuration
settings. Loads a .env file so FEED_WATCH_URL can supply the feed URL.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from dotenv import load_dotenv
from rich.console import Console

from .config import AppConfig, load_config
from .errors import FeedWatchError
from .logging_utils import setup_logging
from .renderer import render_feed
from . import runner

app = typer.Typer(add_completion=False)
console = Console()


@app.callback()
def main():
    """Detect new items in RSS feeds."""
    # Runs before subcommand arguments are parsed, so .env can supply FEED_WATCH_URL
    load_dotenv()


URL_ARGUMENT = typer.Argument(None, envvar="FEED_WATCH_URL", help="RSS feed URL.", show_default=False)
CONFIG_OPTION = typer.Option(None, "--config", "-c", exists=True, help="YAML config file.")


@app.command()
def new(
    url: str | None = URL_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    max_guids: int | None = typer.Option(
        None, "--max-guids", min=0, help="GUIDs captured from the top of the feed."
    ),
    retain: int | None = typer.Option(
        None, "--retain", min=0, help="Newest captured GUIDs treated as not yet seen."
    ),
    show_feed: bool | None = typer.Option(
        None, "--show-feed/--no-show-feed", help="Print the whole feed first."
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Also write new items to this Markdown file."
    ),
    timeout: float | None = typer.Option(None, "--timeout", help="HTTP timeout in seconds."),
    retries: int | None = typer.Option(None, "--retries", min=0, help="HTTP retry attempts."),
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
    log_format: str | None = typer.Option(
        None, "--log-format", help="Log file format: jsonl or plain."
    ),
    log_file: bool | None = typer.Option(
        None, "--log-file/--no-log-file", help="Enable or disable file logging."
    ),
):
    """List the items of a feed that are new relative to its GUID watermark.

    Args:
        url: Feed URL (prompted for when missing)
        config: Optional path to YAML config file
        max_guids: Watermark capacity
        retain: Number of newest watermark entries dropped from the known set
        show_feed: Whether to print the full feed before the new items
        output: Optional Markdown report path
        timeout: HTTP timeout override
        retries: HTTP retry override
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_format: Log file format (jsonl, plain)
        log_file: Enable/disable file logging
    """
    cfg = _load(config)

    # Override with CLI options
    if max_guids is not None:
        cfg.watermark.max_guids = max_guids
    if retain is not None:
        cfg.watermark.retain = retain
    if show_feed is not None:
        cfg.output.show_feed = show_feed
    if output is not None:
        cfg.output.markdown_path = str(output)
    if timeout is not None:
        cfg.fetch.timeout_seconds = timeout
    if retries is not None:
        cfg.fetch.retries = retries
    if log_level:
        cfg.logging.level = log_level
    if log_format:
        cfg.logging.format = log_format
    if log_file is not None:
        cfg.logging.file = log_file

    setup_logging(cfg.logging)
    url = _resolve_url(url)
    try:
        report = runner.run_pipeline(url, cfg, console=console)
    except FeedWatchError as exc:
        _fail(url, exc)
    except OSError as exc:
        console.print(f"Failed to write report: {exc}", markup=False, style="red")
        raise typer.Exit(code=1)
    if report.markdown_path is not None:
        console.print(f"Report written: {report.markdown_path}")


@app.command()
def show(
    url: str | None = URL_ARGUMENT,
    config: Path | None = CONFIG_OPTION,
    log_level: str | None = typer.Option(None, "--log-level", help="Logging level."),
):
    """Fetch a feed and print every item."""
    cfg = _load(config)
    if log_level:
        cfg.logging.level = log_level
    logger = setup_logging(cfg.logging)
    url = _resolve_url(url)
    try:
        feed = runner.load_feed(url, cfg, logger)
    except FeedWatchError as exc:
        _fail(url, exc)
    render_feed(feed, console)


def _load(config: Path | None) -> AppConfig:
    return load_config(str(config) if config else None)


def _resolve_url(url: str | None) -> str:
    if url and url.strip():
        return url.strip()
    return typer.prompt("Enter RSS feed URL").strip()


def _fail(url: str, exc: FeedWatchError) -> NoReturn:
    console.print(f"Failed to fetch or parse feed from {url}", markup=False, style="red")
    console.print(str(exc), markup=False, style="red")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
