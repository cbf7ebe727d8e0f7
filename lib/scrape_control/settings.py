"""Runtime settings for the scrape control table

Settings are read from environment variables so the same code runs inside
Lambda and from a workstation. Nothing here creates AWS clients; the store
and the control table manager are built from a settings object explicitly.
"""

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from scrape_control.constants import (
    DEFAULT_CATEGORY_PAGE_URL,
    DEFAULT_NAV_SELECTOR,
    DEFAULT_REGION,
    DEFAULT_REQUEST_TIMEOUT,
)

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigSource(str, Enum):
    """Where reset_config gets its target list from."""

    STATIC = "static"
    LIVE = "live"


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {value!r}")


@dataclass
class ControlTableSettings:
    """
    Settings for the control table and its config provider.

    Attributes:
        table_name: Control table name (CONTROL_TABLE_NAME)
        region: AWS region for DynamoDB (AWS_REGION)
        config_source: static seed list or live page extraction
        category_page_url: Page parsed by the live provider
        nav_selector: CSS selector for navigation list items
        request_timeout: HTTP timeout in seconds
        require_targets: Treat zero extracted targets as an error
        chain_targets: Chain targets in list order on reset
        wait_for_table: Wait for a new table to become ACTIVE
    """

    table_name: Optional[str] = None
    region: str = DEFAULT_REGION
    config_source: ConfigSource = ConfigSource.STATIC
    category_page_url: str = DEFAULT_CATEGORY_PAGE_URL
    nav_selector: str = DEFAULT_NAV_SELECTOR
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    require_targets: bool = False
    chain_targets: bool = False
    wait_for_table: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ControlTableSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from, defaults to os.environ

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        source = env.get("CONTROL_CONFIG_SOURCE", ConfigSource.STATIC.value).strip().lower()
        try:
            config_source = ConfigSource(source)
        except ValueError:
            raise ValueError(
                f"CONTROL_CONFIG_SOURCE must be one of "
                f"{[s.value for s in ConfigSource]}, got {source!r}"
            ) from None

        timeout = env.get("CONTROL_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))
        try:
            request_timeout = float(timeout)
        except ValueError:
            raise ValueError(f"CONTROL_REQUEST_TIMEOUT must be a number, got {timeout!r}") from None
        if request_timeout <= 0:
            raise ValueError("CONTROL_REQUEST_TIMEOUT must be positive")

        settings = cls(
            table_name=env.get("CONTROL_TABLE_NAME") or None,
            region=env.get("AWS_REGION") or DEFAULT_REGION,
            config_source=config_source,
            category_page_url=env.get("CONTROL_CATEGORY_PAGE_URL") or DEFAULT_CATEGORY_PAGE_URL,
            nav_selector=env.get("CONTROL_NAV_SELECTOR") or DEFAULT_NAV_SELECTOR,
            request_timeout=request_timeout,
            require_targets=_parse_bool(
                "CONTROL_REQUIRE_TARGETS", env.get("CONTROL_REQUIRE_TARGETS", "false")
            ),
            chain_targets=_parse_bool(
                "CONTROL_CHAIN_TARGETS", env.get("CONTROL_CHAIN_TARGETS", "false")
            ),
            wait_for_table=_parse_bool(
                "CONTROL_WAIT_FOR_TABLE", env.get("CONTROL_WAIT_FOR_TABLE", "true")
            ),
        )

        logger.debug(f"Loaded control table settings: {settings}")
        return settings

    def require_table_name(self, table_name: Optional[str] = None) -> str:
        """
        Resolve the table name, preferring an explicit argument.

        Raises:
            ValueError: If neither the argument nor CONTROL_TABLE_NAME is set
        """
        resolved = table_name or self.table_name
        if not resolved:
            raise ValueError(
                "Control table name not provided. "
                "Set CONTROL_TABLE_NAME environment variable or provide table_name parameter."
            )
        return resolved
