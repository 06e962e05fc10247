"""
Console and Markdown rendering for feeds and new items.

Empty fields are shown as "N/A"; the data model itself keeps them as
empty strings.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console

from .core.types import Feed, Item

MISSING = "N/A"
ITEM_PREFIX = "    |_ "


def display(value: str) -> str:
    return value if value else MISSING


def item_lines(item: Item, prefix: str = "") -> list[str]:
    """Format one item as labelled lines.

    Examples:
        >>> item_lines(Item(title="Hello", categories=["a", "b"]))[-1]
        'Categories (2): a b'
    """
    categories = " ".join(item.categories)
    return [
        f"{prefix}Title: {display(item.title)}",
        f"{prefix}Link: {display(item.link)}",
        f"{prefix}GUID: {display(item.guid)}",
        f"{prefix}Description: {display(item.description)}",
        f"{prefix}Publication Date: {display(item.pub_date)}",
        f"{prefix}Author: {display(item.author)}",
        f"{prefix}Categories ({len(item.categories)}): {categories}".rstrip(),
    ]


def feed_lines(feed: Feed) -> list[str]:
    lines = [
        f"- Title: {display(feed.title)}",
        f"- Link: {display(feed.link)}",
        f"- Description: {display(feed.description)}",
        f"- Items ({feed.item_count}):",
    ]
    for index, item in enumerate(feed.items, start=1):
        lines.append(f"    Item {index}:")
        lines.extend(item_lines(item, ITEM_PREFIX))
    return lines


def new_item_lines(feed: Feed, items: list[Item]) -> list[str]:
    lines = [f"New Articles from <{display(feed.title)}>", "-" * 40]
    for index, item in enumerate(items):
        lines.append(f"- item {index}")
        lines.extend(item_lines(item, ITEM_PREFIX))
    return lines


def render_feed(feed: Feed, console: Console) -> None:
    _print_lines(feed_lines(feed), console)


def render_new_items(feed: Feed, items: list[Item], console: Console) -> None:
    _print_lines(new_item_lines(feed, items), console)


def render_markdown(feed: Feed, items: list[Item], output_path: Path) -> None:
    """Write the new items of a feed as a Markdown report."""
    generated_at = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M UTC")
    lines = [
        f"# New Articles from {display(feed.title)}",
        "",
        f"Generated: {generated_at}",
        f"Source: {display(feed.link)}",
        f"Total: {len(items)}",
        "",
    ]
    for item in items:
        lines.append(f"## {display(item.title)}")
        lines.append(f"- Link: {display(item.link)}")
        lines.append(f"- GUID: {display(item.guid)}")
        if item.pub_date:
            lines.append(f"- Published: {item.pub_date}")
        if item.author:
            lines.append(f"- Author: {item.author}")
        if item.categories:
            lines.append(f"- Categories: {', '.join(item.categories)}")
        if item.description:
            lines.append("")
            lines.append(item.description)
        lines.append("")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text("\n".join(lines), encoding="utf-8")


def _print_lines(lines: list[str], console: Console) -> None:
    # Feed text may contain square brackets; never treat it as rich markup
    for line in lines:
        console.print(line, markup=False, highlight=False, soft_wrap=True)
