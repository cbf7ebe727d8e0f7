"""
Config providers for reset_config.

Two implementations behind one interface: a static seed list and a live
provider that derives the list from the retailer's navigation page.
"""

import logging
from abc import ABC, abstractmethod

import httpx

from scrape_control.constants import (
    DEFAULT_CATEGORY_PAGE_URL,
    DEFAULT_NAV_SELECTOR,
    DEFAULT_REQUEST_TIMEOUT,
    STATIC_CATEGORY_URLS,
)
from scrape_control.exceptions import ExtractionError
from scrape_control.extractor.fetcher import fetch_page
from scrape_control.extractor.parser import parse_navigation
from scrape_control.models import ScrapeTarget, ScrapingConfig
from scrape_control.settings import ConfigSource, ControlTableSettings

logger = logging.getLogger(__name__)


class ConfigProvider(ABC):
    """Source of the scraping config written by reset_config."""

    @abstractmethod
    def extract_config(self) -> ScrapingConfig:
        """Build a fresh config with every target in the ready state."""


class StaticConfigProvider(ConfigProvider):
    """Hard-coded category list. A seed config that will go stale."""

    def __init__(self, urls: tuple[str, ...] | list[str] = STATIC_CATEGORY_URLS):
        self.urls = tuple(urls)

    def extract_config(self) -> ScrapingConfig:
        return ScrapingConfig(urls=[ScrapeTarget(url=url) for url in self.urls])


class LivePageConfigProvider(ConfigProvider):
    """
    Derives targets from the category navigation of a live page.

    Fetch failures raise FetchError and markup mismatches raise
    ExtractionError; neither is retried.
    """

    def __init__(
        self,
        page_url: str = DEFAULT_CATEGORY_PAGE_URL,
        selector: str = DEFAULT_NAV_SELECTOR,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        require_targets: bool = False,
        client: httpx.Client | None = None,
    ):
        """
        Initialize live provider.

        Args:
            page_url: Category listing page to parse
            selector: CSS selector for the navigation list items
            timeout: HTTP timeout in seconds
            require_targets: Raise ExtractionError when nothing matches
            client: Optional httpx client, mainly for tests
        """
        self.page_url = page_url
        self.selector = selector
        self.timeout = timeout
        self.require_targets = require_targets
        self.client = client

    def extract_config(self) -> ScrapingConfig:
        result = fetch_page(self.page_url, timeout=self.timeout, client=self.client)
        targets = parse_navigation(result.content, result.url, self.selector)

        if not targets:
            message = f"No navigation items matched {self.selector!r} on {result.url}"
            if self.require_targets:
                raise ExtractionError(message)
            # Page layout may have changed; an empty list is still written
            logger.warning(message)

        return ScrapingConfig(urls=targets)


def get_config_provider(
    settings: ControlTableSettings, client: httpx.Client | None = None
) -> ConfigProvider:
    """
    Select the provider named by settings.config_source.

    Args:
        settings: Control table settings
        client: Optional httpx client handed to the live provider

    Returns:
        StaticConfigProvider or LivePageConfigProvider
    """
    if settings.config_source == ConfigSource.LIVE:
        return LivePageConfigProvider(
            page_url=settings.category_page_url,
            selector=settings.nav_selector,
            timeout=settings.request_timeout,
            require_targets=settings.require_targets,
            client=client,
        )
    return StaticConfigProvider()
