"""
Main pipeline orchestration for feed-watch.

This module coordinates one run:
1. Fetch the feed over HTTP
2. Parse it into a Feed
3. Capture a GUID watermark and diff the feed against it
4. Render the new items (console, optionally Markdown)

Fetch and parse failures propagate to the caller; nothing is retried here
beyond the fetcher's own attempts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from .config import AppConfig
from .core.novelty import NoveltyResult, detect_new_items
from .core.types import Feed
from .errors import FetchError, ParseError
from .fetcher import fetch_feed
from .logging_utils import feed_logger, log_event
from .parser import parse_feed
from .renderer import render_feed, render_markdown, render_new_items


@dataclass
class NoveltyReport:
    """Everything produced by one pipeline run.

    Attributes:
        url: The feed URL
        feed: The parsed feed
        novelty: Watermark, known GUIDs and new items
        markdown_path: Where the Markdown report was written, if anywhere
    """
    url: str
    feed: Feed
    novelty: NoveltyResult
    markdown_path: Path | None = None


def load_feed(url: str, cfg: AppConfig, logger: logging.Logger | None = None) -> Feed:
    """Fetch and parse a feed.

    Raises:
        FetchError: If the download fails
        ParseError: If the body is not a usable RSS document
    """
    log = feed_logger(logger or logging.getLogger("feed_watch"), url)
    log_event(log, "Fetching feed", event="fetch_start")
    try:
        body = fetch_feed(url, cfg.fetch)
    except FetchError as exc:
        log.error(
            "Fetch failed",
            extra={"event": "fetch_failed", "status_code": exc.status_code, "error": str(exc)},
        )
        raise
    log_event(log, "Fetched feed", event="fetch_done", bytes=len(body))

    try:
        feed = parse_feed(body)
    except ParseError as exc:
        log.error("Parse failed", extra={"event": "parse_failed", "error": str(exc)})
        raise
    log_event(
        log,
        "Parsed feed",
        event="parse_done",
        title=feed.title,
        items=feed.item_count,
    )
    return feed


def run_pipeline(url: str, cfg: AppConfig, console: Console | None = None) -> NoveltyReport:
    """Run one fetch, parse and novelty pass and render the result.

    Args:
        url: The feed URL
        cfg: Application configuration
        console: Rich console for output (creates default if None)

    Returns:
        The NoveltyReport for this run
    """
    console = console or Console()
    logger = logging.getLogger("feed_watch")
    log = feed_logger(logger, url)

    feed = load_feed(url, cfg, logger)
    novelty = detect_new_items(feed, cfg.watermark.max_guids, cfg.watermark.retain)
    log_event(
        log,
        "Novelty pass complete",
        event="novelty_done",
        captured=len(novelty.watermark),
        known=len(novelty.known),
        new=len(novelty.new_items),
    )

    if cfg.output.show_feed:
        render_feed(feed, console)
    render_new_items(feed, novelty.new_items, console)

    markdown_path = None
    if cfg.output.markdown_path:
        markdown_path = Path(cfg.output.markdown_path)
        render_markdown(feed, novelty.new_items, markdown_path)
        log_event(log, "Markdown written", event="markdown_written", output=str(markdown_path))

    return NoveltyReport(url=url, feed=feed, novelty=novelty, markdown_path=markdown_path)
