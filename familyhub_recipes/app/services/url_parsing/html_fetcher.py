"""HTML fetching and URL validation utilities."""

import asyncio
import logging
from typing import Optional
from urllib.parse import urlparse

import httpx

from familyhub_recipes.app.core.config import get_settings
from familyhub_recipes.app.services.url_parsing.errors import (
    FetchError,
    FetchTimeoutError,
    InvalidInputError,
)

logger = logging.getLogger(__name__)


def validate_url(url: str) -> str:
    """Return ``url`` stripped, or raise ``InvalidInputError`` if it is not absolute http(s)."""
    if not url or not isinstance(url, str):
        raise InvalidInputError("URL is required")
    url = url.strip()
    try:
        parsed = urlparse(url)
    except ValueError as exc:
        raise InvalidInputError(f"Invalid URL: {exc}") from exc
    if parsed.scheme not in {"http", "https"} or not parsed.netloc:
        raise InvalidInputError("URL must be an absolute http(s) URL.")
    return url


def build_headers() -> dict[str, str]:
    settings = get_settings()
    return {
        "User-Agent": settings.scraper_user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": settings.scraper_accept_language,
    }


async def fetch_html(url: str, timeout: Optional[float] = None) -> str:
    """Fetch the raw HTML of a recipe page.

    Makes exactly one request. Raises ``InvalidInputError`` before touching the
    network for malformed URLs, ``FetchTimeoutError`` when the time budget runs
    out and ``FetchError`` for transport failures or non-2xx responses.
    """
    url = validate_url(url)
    if timeout is None:
        timeout = get_settings().fetch_timeout_seconds

    try:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(timeout), follow_redirects=True, headers=build_headers()
        ) as client:
            # Overall deadline; httpx timeouts only bound each individual read
            response = await asyncio.wait_for(client.get(url), timeout)
    except (asyncio.TimeoutError, httpx.TimeoutException) as exc:
        logger.warning("Timed out after %.1fs fetching %s", timeout, url)
        raise FetchTimeoutError(f"Timed out after {timeout:.0f} seconds") from exc
    except httpx.HTTPError as exc:
        logger.warning("Network error fetching %s: %s", url, exc)
        raise FetchError(f"Network error: {exc}") from exc

    logger.info("Fetch response status for %s: %s", url, response.status_code)
    if not response.is_success:
        reason = response.reason_phrase
        raise FetchError(
            f"HTTP {response.status_code}: {reason}",
            status_code=response.status_code,
            reason=reason,
        )

    html = response.text
    logger.info("HTML length: %d", len(html))
    return html
