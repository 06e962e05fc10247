"""
feed-watch - RSS novelty detection.

This package fetches an RSS feed, parses it into Feed and Item values and
reports the items that are new relative to a bounded watermark of GUIDs.

Main entry point is the CLI via `feed-watch new` command.

Example:
    $ feed-watch new https://example.com/feed.xml --max-guids 128 --retain 5
"""

__all__ = [
    "__version__",
    "Feed",
    "Item",
    "Watermark",
    "parse_feed",
    "parse_item",
    "extract_cdata",
    "capture_watermark",
    "known_guids",
    "find_new",
    "detect_new_items",
    "FetchError",
    "ParseError",
    "InvalidArgument",
]
__version__ = "0.1.0"

from .core import (
    Feed,
    Item,
    Watermark,
    capture_watermark,
    detect_new_items,
    extract_cdata,
    find_new,
    known_guids,
)
from .errors import FetchError, InvalidArgument, ParseError
from .parser import parse_feed, parse_item
