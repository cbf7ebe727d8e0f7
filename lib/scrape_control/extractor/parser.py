"""
Navigation parsing for config extraction.

Turns the list items of the page's "current" navigation section into
scrape targets, in document order.
"""

import logging
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from scrape_control.constants import DEFAULT_NAV_SELECTOR
from scrape_control.exceptions import ExtractionError
from scrape_control.models import ScrapeTarget, TargetState

logger = logging.getLogger(__name__)


def parse_navigation(
    html: str, page_url: str, selector: str = DEFAULT_NAV_SELECTOR
) -> list[ScrapeTarget]:
    """
    Extract one scrape target per navigation list item.

    Each item contributes its stripped text as the title and its first
    link, resolved against page_url, as the URL. Repeated links are kept,
    one target per matched item.

    Args:
        html: Page markup
        page_url: URL the markup was fetched from
        selector: CSS selector matching the navigation list items

    Returns:
        Targets in document order, empty if nothing matched

    Raises:
        ExtractionError: If the selector is invalid or an item has no usable link
    """
    soup = BeautifulSoup(html, "lxml")

    try:
        items = soup.select(selector)
    except SelectorSyntaxError as e:
        raise ExtractionError(f"Invalid navigation selector {selector!r}: {e}") from e

    targets: list[ScrapeTarget] = []

    for position, item in enumerate(items):
        anchor = item if item.name == "a" and item.get("href") else item.find("a", href=True)
        if anchor is None:
            raise ExtractionError(
                f"Navigation item {position} matched by {selector!r} has no link"
            )

        url = urljoin(page_url, anchor["href"].strip())
        if urlparse(url).scheme not in ("http", "https"):
            raise ExtractionError(f"Navigation item {position} has a non-HTTP link: {url}")

        title = item.get_text(" ", strip=True)
        targets.append(
            ScrapeTarget(
                url=url,
                title=title or None,
                state=TargetState.READY,
                next_in_chain="",
            )
        )

    logger.info(f"Parsed {len(targets)} targets from {len(items)} navigation items")
    return targets
