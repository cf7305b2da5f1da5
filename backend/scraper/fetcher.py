"""HTTP fetcher with optional relay routing."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from backend.config import settings
from backend.errors import FetchError
from backend.scraper.models import RawPage

logger = logging.getLogger(__name__)


def _default_headers() -> dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": "text/html",
    }


def fetch_url(
    url: str,
    *,
    relay_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    When *relay_url* is given the request goes to the relay instead, with the
    target address passed as the ``url`` query parameter; the relay is
    expected to answer with the target's raw markup.

    A single attempt is made.  Transport errors, timeouts, non-2xx responses
    and empty bodies are all reported as :class:`~backend.errors.FetchError`
    with the underlying message preserved.
    """
    request_timeout = settings.request_timeout if timeout is None else timeout

    logger.info("Fetching %s%s", url, f" via relay {relay_url}" if relay_url else "")
    try:
        with httpx.Client(
            headers=_default_headers(),
            timeout=request_timeout,
            follow_redirects=True,
        ) as client:
            if relay_url:
                response = client.get(relay_url, params={"url": url})
            else:
                response = client.get(url)
            response.raise_for_status()
            html = response.text
            status_code = response.status_code
    except httpx.HTTPError as exc:
        logger.warning("Fetch failed for %s: %s", url, exc)
        raise FetchError(url, str(exc) or type(exc).__name__) from exc

    if not html.strip():
        logger.warning("Fetch returned an empty body for %s", url)
        raise FetchError(url, "empty response body")

    return RawPage(url=url, html=html, status_code=status_code)
