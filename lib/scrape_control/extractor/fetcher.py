"""
HTTP fetching of the category listing page.

A single GET with no retries: any transport failure or non-2xx response
is raised as FetchError for the caller to handle.
"""

import logging
from dataclasses import dataclass

import httpx

from scrape_control.constants import DEFAULT_REQUEST_TIMEOUT
from scrape_control.exceptions import FetchError

logger = logging.getLogger(__name__)

USER_AGENT = "ScrapeControl/1.0"

DEFAULT_HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-GB,en;q=0.5",
}


@dataclass
class FetchResult:
    """Result of a page fetch."""

    url: str
    status_code: int
    content: str
    content_type: str


def fetch_page(
    url: str,
    timeout: float = DEFAULT_REQUEST_TIMEOUT,
    headers: dict[str, str] | None = None,
    client: httpx.Client | None = None,
) -> FetchResult:
    """
    Fetch a page over HTTP.

    Args:
        url: URL to fetch
        timeout: Request timeout in seconds (ignored when client is given)
        headers: Extra headers merged over the defaults
        client: Optional httpx client to reuse; it is not closed here

    Returns:
        FetchResult for the final (post-redirect) URL

    Raises:
        FetchError: On transport failure or a non-2xx status
    """
    request_headers = {**DEFAULT_HEADERS, **(headers or {})}

    if client is None:
        with httpx.Client(timeout=timeout, follow_redirects=True) as owned_client:
            return _get(owned_client, url, request_headers)
    return _get(client, url, request_headers)


def _get(client: httpx.Client, url: str, headers: dict[str, str]) -> FetchResult:
    try:
        response = client.get(url, headers=headers)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        status = e.response.status_code
        logger.error(f"Category page fetch returned HTTP {status} for {url}")
        raise FetchError(url, f"HTTP {status}: {e.response.reason_phrase}", status) from e
    except httpx.RequestError as e:
        logger.error(f"Category page fetch failed for {url}: {e}")
        raise FetchError(url, f"Request error: {e}") from e

    logger.info(f"Fetched {url} ({response.status_code}, {len(response.text)} chars)")

    return FetchResult(
        url=str(response.url),
        status_code=response.status_code,
        content=response.text,
        content_type=response.headers.get("content-type", ""),
    )
