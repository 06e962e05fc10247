"""
Core domain models and the novelty engine.

This package contains data types and algorithms that do no I/O and are
independent of fetching and presentation.
"""

from .types import Feed, Item, Watermark
from .cdata import extract_cdata
from .novelty import NoveltyResult, capture_watermark, detect_new_items, find_new, known_guids

__all__ = [
    "Feed",
    "Item",
    "Watermark",
    "extract_cdata",
    "NoveltyResult",
    "capture_watermark",
    "detect_new_items",
    "find_new",
    "known_guids",
]
