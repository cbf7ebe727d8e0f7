"""
Config extraction for the scrape control table.

Architecture:
- Fetcher: single HTTP GET of the category page, no retries
- Parser: navigation list items to scrape targets
- Providers: static seed list or live page, chosen by settings
"""

from scrape_control.extractor.fetcher import FetchResult, fetch_page
from scrape_control.extractor.parser import parse_navigation
from scrape_control.extractor.providers import (
    ConfigProvider,
    LivePageConfigProvider,
    StaticConfigProvider,
    get_config_provider,
)

__all__ = [
    "ConfigProvider",
    "FetchResult",
    "LivePageConfigProvider",
    "StaticConfigProvider",
    "fetch_page",
    "get_config_provider",
    "parse_navigation",
]
