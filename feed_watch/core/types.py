"""
Core data types for feed-watch.

This module defines the values that flow through the pipeline:
- Item: One article entry parsed from an RSS <item>
- Feed: Channel metadata plus its items in document order
- Watermark: Bounded, ordered record of GUIDs seen in a fetch
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class Item:
    """Represents one article parsed from an RSS feed.

    Every text field is an empty string when the element was absent.

    Attributes:
        title: The article headline
        link: URL of the article
        guid: Unique identifier, the only key used to compare items
        description: Summary or body text
        pub_date: Publication date exactly as written in the feed
        author: Author name, from <author> or <dc:creator>
        categories: Category strings in document order, duplicates kept
    """
    title: str = ""
    link: str = ""
    guid: str = ""
    description: str = ""
    pub_date: str = ""
    author: str = ""
    categories: list[str] = field(default_factory=list)


@dataclass
class Feed:
    """Represents one RSS channel.

    Attributes:
        title: Channel title
        link: Channel homepage URL
        description: Channel description
        items: Items in document order (newest first by RSS convention)
    """
    title: str = ""
    link: str = ""
    description: str = ""
    items: list[Item] = field(default_factory=list)

    @property
    def item_count(self) -> int:
        return len(self.items)


@dataclass(frozen=True)
class Watermark:
    """GUIDs captured from a fetch, ordered oldest to newest.

    The last entry is the newest item seen; eviction starts from the
    front. Duplicate GUIDs are kept as captured.

    Attributes:
        guids: Captured GUIDs, oldest first
        capacity: The maximum number of GUIDs requested at capture time
    """
    guids: tuple[str, ...] = ()
    capacity: int = 0

    def __len__(self) -> int:
        return len(self.guids)

    def __iter__(self) -> Iterator[str]:
        return iter(self.guids)

    @property
    def newest(self) -> str | None:
        return self.guids[-1] if self.guids else None

    @property
    def oldest(self) -> str | None:
        return self.guids[0] if self.guids else None

    def without_newest(self, count: int) -> Watermark:
        """Return a copy with the `count` newest GUIDs removed.

        A count at or above the current size yields an empty watermark.
        """
        keep = max(len(self.guids) - count, 0)
        return Watermark(guids=self.guids[:keep], capacity=self.capacity)
