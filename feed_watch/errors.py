"""
Exception types raised by the feed-watch pipeline.

The core never retries or swallows these; they propagate to the caller,
which decides how to report them (the CLI prints a failure line and exits).
"""

from __future__ import annotations


class FeedWatchError(Exception):
    """Base class for all feed-watch failures."""


class FetchError(FeedWatchError):
    """The feed could not be downloaded.

    Attributes:
        url: The URL that was requested
        status_code: HTTP status of the last response, or None for
            network-level failures
    """

    def __init__(self, url: str, message: str, status_code: int | None = None):
        super().__init__(f"{url}: {message}")
        self.url = url
        self.status_code = status_code


class ParseError(FeedWatchError):
    """The document is not well-formed XML or has no channel element."""


class InvalidArgument(FeedWatchError, ValueError):
    """A caller broke the contract of a novelty function."""
