"""
Novelty detection by GUID watermark.

A watermark is captured from the top of a feed, trimmed of the entries the
caller has already delivered, and then used as the "known" set: every feed
item whose GUID is not known is reported as new, in feed order.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..errors import InvalidArgument
from .types import Feed, Item, Watermark


@dataclass
class NoveltyResult:
    """Outcome of one novelty pass.

    Attributes:
        watermark: GUIDs captured from the feed, oldest first
        known: GUIDs treated as already seen
        new_items: Items whose GUID is not in `known`, in feed order
    """
    watermark: Watermark
    known: frozenset[str]
    new_items: list[Item]


def capture_watermark(feed: Feed, max_count: int) -> Watermark:
    """Capture the GUIDs of the first `max_count` items of a feed.

    Feed order is newest first, so the captured GUIDs are reversed to make
    the watermark run oldest to newest: for k captured items the result is
    items[k-1].guid, ..., items[0].guid.

    Args:
        feed: The parsed feed
        max_count: Maximum number of GUIDs to capture

    Returns:
        A Watermark holding at most `max_count` GUIDs

    Raises:
        InvalidArgument: If feed is None or max_count is not a
            non-negative int
    """
    _require_feed(feed)
    _require_count("max_count", max_count)
    top = feed.items[:max_count]
    return Watermark(guids=tuple(item.guid for item in reversed(top)), capacity=max_count)


def known_guids(watermark: Watermark, retain: int) -> frozenset[str]:
    """Return the watermark GUIDs still considered seen.

    The `retain` newest entries are dropped and the remaining
    `len(watermark) - retain` oldest entries form the known set. With a
    watermark of 128 and retain of 5, the 123 oldest GUIDs are known.

    Raises:
        InvalidArgument: If watermark is None or retain is not a
            non-negative int
    """
    if watermark is None:
        raise InvalidArgument("watermark must not be None")
    _require_count("retain", retain)
    return frozenset(watermark.without_newest(retain))


def find_new(feed: Feed, known: Iterable[str]) -> list[Item]:
    """Return feed items whose GUID is not in `known`.

    Items are returned in document order. Each occurrence of a duplicated
    GUID is tested on its own, so duplicates of an unknown GUID are all
    reported.

    Raises:
        InvalidArgument: If feed is None
    """
    _require_feed(feed)
    known_set = known if isinstance(known, (set, frozenset)) else set(known or ())
    return [item for item in feed.items if item.guid not in known_set]


def detect_new_items(feed: Feed, max_count: int, retain: int) -> NoveltyResult:
    """Capture a watermark, trim it and diff the feed against it."""
    watermark = capture_watermark(feed, max_count)
    known = known_guids(watermark, retain)
    return NoveltyResult(watermark=watermark, known=known, new_items=find_new(feed, known))


def _require_feed(feed: Feed | None) -> None:
    if feed is None:
        raise InvalidArgument("feed must not be None")


def _require_count(name: str, value: int) -> None:
    # bool is an int subclass; True/False are never meaningful counts here
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise InvalidArgument(f"{name} must be non-negative, got {value}")
