"""
Data models for the scrape control table.

These models describe the singleton control record as it is stored in
DynamoDB: one record, one embedded config, an ordered list of targets.
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any

from scrape_control.constants import CONFIG_ATTRIBUTE, CONTROL_RECORD_ID, CONTROL_TABLE_KEY


class TargetState(str, Enum):
    """Processing state for an individual scrape target."""

    READY = "ready"
    IN_PROGRESS = "in-progress"
    DONE = "done"
    ERROR = "error"


@dataclass
class ScrapeTarget:
    """
    A single page to scrape.

    Attributes:
        url: Absolute URL of the page
        title: Display label taken from the navigation markup
        state: Processing state, written as ready by reset
        next_in_chain: URL of the successor target, empty when unchained
    """

    url: str
    title: str | None = None
    state: TargetState = TargetState.READY
    next_in_chain: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for DynamoDB storage."""
        data = {
            "url": self.url,
            "state": self.state.value,
            "nextInChain": self.next_in_chain,
        }

        if self.title:
            data["title"] = self.title

        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScrapeTarget":
        """Create ScrapeTarget from DynamoDB map."""
        return cls(
            url=data["url"],
            title=data.get("title") or None,
            state=TargetState(data.get("state", "ready")),
            next_in_chain=data.get("nextInChain", ""),
        )


@dataclass
class ScrapingConfig:
    """Ordered list of scrape targets. Order is the default chain order."""

    urls: list[ScrapeTarget] = field(default_factory=list)

    def chained(self) -> "ScrapingConfig":
        """Return a copy where each target points at the next one's URL."""
        successors = [target.url for target in self.urls[1:]] + [""]
        return ScrapingConfig(
            urls=[
                replace(target, next_in_chain=successor)
                for target, successor in zip(self.urls, successors)
            ]
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for DynamoDB storage."""
        return {"urls": [target.to_dict() for target in self.urls]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ScrapingConfig":
        """Create ScrapingConfig from DynamoDB map."""
        return cls(urls=[ScrapeTarget.from_dict(item) for item in data.get("urls", [])])


@dataclass
class ControlRecord:
    """The singleton record embedding the whole scraping config."""

    config: ScrapingConfig
    id: str = CONTROL_RECORD_ID

    def to_item(self) -> dict[str, Any]:
        """Convert to a DynamoDB item."""
        return {
            CONTROL_TABLE_KEY: self.id,
            CONFIG_ATTRIBUTE: self.config.to_dict(),
        }

    @classmethod
    def from_item(cls, item: dict[str, Any]) -> "ControlRecord":
        """Create ControlRecord from a DynamoDB item."""
        return cls(
            id=item.get(CONTROL_TABLE_KEY, CONTROL_RECORD_ID),
            config=ScrapingConfig.from_dict(item.get(CONFIG_ATTRIBUTE, {})),
        )
