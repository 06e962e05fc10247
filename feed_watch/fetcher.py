"""
HTTP feed fetching with retries.

The fetcher downloads the raw feed body and hands the bytes to the parser
untouched, so the XML layer can detect the document encoding itself.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import time

import httpx

from .config import FetchConfig
from .errors import FetchError

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Result of an HTTP fetch operation.

    Either content will be populated (success) or error will be populated
    (failure), but never both. status_code may be None for network-level
    failures.

    Attributes:
        url: The URL that was fetched
        status_code: HTTP status code, or None if request failed before getting response
        content: The raw response body, or None on error
        error: Error message if fetch failed, None on success
    """
    url: str
    status_code: int | None
    content: bytes | None
    error: str | None


def fetch_url(
    url: str,
    timeout: float,
    retries: int,
    user_agent: str,
    trust_env: bool,
) -> FetchResult:
    """Fetch a URL using httpx with retry logic.

    Uses a synchronous HTTP client that follows redirects and respects
    system proxy settings when trust_env is enabled. A non-success status
    counts as a failed attempt.

    Args:
        url: The URL to fetch
        timeout: Request timeout in seconds
        retries: Number of retry attempts after initial failure
        user_agent: User-Agent header string
        trust_env: Whether to respect system proxy settings from environment

    Returns:
        FetchResult with content on success or error message on failure
    """
    headers = {"User-Agent": user_agent}
    last_error: str | None = None
    last_status: int | None = None

    # Linear backoff between attempts: 0.5s, 1.0s, 1.5s...
    for attempt in range(retries + 1):
        try:
            with httpx.Client(
                timeout=timeout,
                headers=headers,
                follow_redirects=True,
                trust_env=trust_env,
            ) as client:
                resp = client.get(url)
                last_status = resp.status_code
                resp.raise_for_status()
                return FetchResult(url=url, status_code=resp.status_code, content=resp.content, error=None)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            last_error = f"{type(exc).__name__}: {exc}"
            logger.debug("Fetch attempt %d for %s failed: %s", attempt + 1, url, last_error)
            if attempt < retries:
                time.sleep(0.5 * (attempt + 1))

    return FetchResult(url=url, status_code=last_status, content=None, error=last_error)


def fetch_feed(url: str, cfg: FetchConfig) -> bytes:
    """Download a feed body, raising FetchError when every attempt fails."""
    result = fetch_url(
        url,
        timeout=cfg.timeout_seconds,
        retries=cfg.retries,
        user_agent=cfg.user_agent,
        trust_env=cfg.trust_env,
    )
    if result.error is not None or result.content is None:
        raise FetchError(url, result.error or "empty response", status_code=result.status_code)
    return result.content
