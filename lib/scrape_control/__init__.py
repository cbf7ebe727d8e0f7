"""Scrape Control

DynamoDB control table and config extraction for a web scraping job.
"""

from scrape_control import constants
from scrape_control.control_table import ControlTableManager
from scrape_control.exceptions import (
    ControlTableError,
    ExtractionError,
    FetchError,
    MalformedRecordError,
    NotFoundError,
    StoreError,
)
from scrape_control.models import ControlRecord, ScrapeTarget, ScrapingConfig, TargetState
from scrape_control.settings import ConfigSource, ControlTableSettings
from scrape_control.store import DynamoDBStore

__all__ = [
    "ConfigSource",
    "ControlRecord",
    "ControlTableError",
    "ControlTableManager",
    "ControlTableSettings",
    "DynamoDBStore",
    "ExtractionError",
    "FetchError",
    "MalformedRecordError",
    "NotFoundError",
    "ScrapeTarget",
    "ScrapingConfig",
    "StoreError",
    "TargetState",
    "constants",
]
