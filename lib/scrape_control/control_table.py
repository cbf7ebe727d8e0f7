"""Control Table Management for scrape runs

This module owns the DynamoDB control table that drives a scrape run. The
table holds a single record, keyed by id "scrapingconfig", that embeds the
whole scraping config: an ordered list of target URLs, each with a state
and an optional nextInChain successor.

The record is only ever written by reset_config, which overwrites it in
full. Reads are eventually consistent and project the config attribute.
"""

import logging
import time
from typing import Any, Dict, List, Optional

from scrape_control.constants import (
    CONFIG_ATTRIBUTE,
    CONTROL_RECORD_ID,
    CONTROL_TABLE_KEY,
    READ_CAPACITY_UNITS,
    WRITE_CAPACITY_UNITS,
)
from scrape_control.exceptions import ControlTableError, MalformedRecordError, NotFoundError
from scrape_control.extractor.providers import (
    ConfigProvider,
    StaticConfigProvider,
    get_config_provider,
)
from scrape_control.logging_utils import log_summary
from scrape_control.models import ControlRecord, ScrapingConfig
from scrape_control.settings import ControlTableSettings
from scrape_control.store import DynamoDBStore

logger = logging.getLogger(__name__)


class ControlTableManager:
    """
    Manages the lifecycle of the scrape control table and its record.

    Usage:
        manager = ControlTableManager.from_settings()
        manager.create_control_table_if_doesnt_exist("scrape-control")
        manager.reset_config("scrape-control")
        config = manager.read_config_from_control_table("scrape-control")

    Design Decisions:
        - Store and provider are injected; no module-level AWS clients
        - Only "not found" is recovered from (existence probe and delete)
        - No retries: every other failure is logged and re-raised
        - reset_config builds the config before writing, so a failed
          extraction leaves the previous record untouched
    """

    def __init__(
        self,
        store: DynamoDBStore,
        provider: Optional[ConfigProvider] = None,
        chain_targets: bool = False,
        wait_for_table: bool = True,
    ):
        """
        Initialize control table manager.

        Args:
            store: DynamoDB adapter used for every table and item operation
            provider: Config source for reset_config, static list if not provided
            chain_targets: Link targets in list order on reset
            wait_for_table: Wait for a created table to become ACTIVE
        """
        self.store = store
        self.provider = provider or StaticConfigProvider()
        self.chain_targets = chain_targets
        self.wait_for_table = wait_for_table

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ControlTableSettings] = None,
        store: Optional[DynamoDBStore] = None,
        provider: Optional[ConfigProvider] = None,
    ) -> "ControlTableManager":
        """
        Build a manager wired from settings (environment if not provided).

        Explicit store/provider arguments take precedence over settings.
        """
        settings = settings or ControlTableSettings.from_env()
        return cls(
            store=store or DynamoDBStore.from_settings(settings),
            provider=provider or get_config_provider(settings),
            chain_targets=settings.chain_targets,
            wait_for_table=settings.wait_for_table,
        )

    # ========================================================================
    # Table lifecycle
    # ========================================================================

    def table_exists(self, table_name: str) -> bool:
        """
        Check whether the table exists.

        Raises:
            StoreError: On any backend failure other than "not found"
        """
        try:
            self.store.describe_table(table_name)
            return True
        except NotFoundError:
            return False
        except ControlTableError:
            logger.exception(f"Error checking whether table {table_name} exists")
            raise

    def ensure_table_exists(self, table_name: str) -> bool:
        """
        Create the table if it is absent.

        Returns:
            True if the table already existed, False if it was created here
        """
        if self.table_exists(table_name):
            logger.debug(f"Control table {table_name} already exists")
            return True

        self.create_control_table(table_name)
        return False

    def create_control_table_if_doesnt_exist(self, table_name: str) -> bool:
        """
        Create the table if it is absent.

        Returns:
            True if the table was created, False if it already existed
        """
        return not self.ensure_table_exists(table_name)

    def create_control_table(self, table_name: str) -> bool:
        """
        Create the control table with its fixed schema.

        Single string partition key "id", provisioned at 5 read and 5 write
        capacity units.

        Raises:
            StoreError: If creation fails (including when the table exists)
        """
        try:
            self.store.create_table(
                table_name,
                key_schema=[{"AttributeName": CONTROL_TABLE_KEY, "KeyType": "HASH"}],
                attribute_definitions=[
                    {"AttributeName": CONTROL_TABLE_KEY, "AttributeType": "S"}
                ],
                provisioned_throughput={
                    "ReadCapacityUnits": READ_CAPACITY_UNITS,
                    "WriteCapacityUnits": WRITE_CAPACITY_UNITS,
                },
                wait=self.wait_for_table,
            )
        except ControlTableError:
            logger.exception(f"Error creating control table {table_name}")
            raise

        logger.info(f"Created control table {table_name}")
        return True

    def delete_control_table(self, table_name: str) -> bool:
        """
        Delete the control table and, with it, the control record.

        Returns:
            True if the table was deleted, False if it did not exist

        Raises:
            StoreError: On any other backend failure
        """
        try:
            self.store.delete_table(table_name)
        except NotFoundError:
            logger.info(f"Control table {table_name} does not exist, nothing to delete")
            return False
        except ControlTableError:
            logger.exception(f"Error deleting control table {table_name}")
            raise

        logger.info(f"Deleted control table {table_name}")
        return True

    # ========================================================================
    # Items
    # ========================================================================

    def write_item_to_control_table(self, table_name: str, item: Dict[str, Any]) -> Dict[str, Any]:
        """
        Write a raw item to the control table, replacing any existing one.

        Returns:
            The DynamoDB put_item response
        """
        try:
            return self.store.put_item(table_name, item)
        except ControlTableError:
            logger.exception(f"Error writing item to control table {table_name}")
            raise

    def read_item_from_control_table(
        self, table_name: str, item_id: str, attributes: List[str]
    ) -> Optional[Dict[str, Any]]:
        """
        Read selected attributes of an item with an eventually consistent read.

        Returns:
            The projected item, or None if no item has this id
        """
        try:
            return self.store.get_item(
                table_name,
                key={CONTROL_TABLE_KEY: item_id},
                attributes=attributes,
                consistent_read=False,
            )
        except ControlTableError:
            logger.exception(f"Error reading item {item_id} from control table {table_name}")
            raise

    # ========================================================================
    # Control record
    # ========================================================================

    def reset_config(self, table_name: str) -> Dict[str, Any]:
        """
        Overwrite the control record with a freshly built config.

        The config comes from the provider; every target starts in the
        ready state. Nothing is written if the provider fails.

        Returns:
            The DynamoDB write acknowledgement

        Raises:
            FetchError: If the live provider cannot fetch its page
            ExtractionError: If the live provider cannot parse its page
            StoreError: If the write fails
        """
        start = time.perf_counter()

        try:
            config = self.provider.extract_config()
        except ControlTableError as e:
            logger.exception(f"Error building scraping config for {table_name}")
            logger.info(log_summary("reset_config", table_name, started_at=start, error=e))
            raise

        if self.chain_targets:
            config = config.chained()

        record = ControlRecord(config=config)
        try:
            response = self.write_item_to_control_table(table_name, record.to_item())
        except ControlTableError as e:
            logger.info(
                log_summary(
                    "reset_config",
                    table_name,
                    started_at=start,
                    target_count=len(config.urls),
                    error=e,
                )
            )
            raise

        logger.info(
            log_summary(
                "reset_config",
                table_name,
                started_at=start,
                target_count=len(config.urls),
                chained=self.chain_targets,
            )
        )
        return response

    def read_config_from_control_table(self, table_name: str) -> ScrapingConfig:
        """
        Read the scraping config from the control record.

        Returns:
            The stored ScrapingConfig, targets in stored order

        Raises:
            NotFoundError: If the record (or the table) does not exist
            MalformedRecordError: If the stored record cannot be decoded
            StoreError: If the read fails
        """
        item = self.read_item_from_control_table(table_name, CONTROL_RECORD_ID, [CONFIG_ATTRIBUTE])

        if not item or CONFIG_ATTRIBUTE not in item:
            logger.warning(f"Control record {CONTROL_RECORD_ID} not found in {table_name}")
            raise NotFoundError(
                CONTROL_RECORD_ID,
                f"Control record {CONTROL_RECORD_ID} not found in table {table_name}",
            )

        try:
            config = ControlRecord.from_item(item).config
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            logger.exception(f"Control record {CONTROL_RECORD_ID} in {table_name} is malformed")
            raise MalformedRecordError(f"{type(e).__name__}: {e}") from e

        logger.debug(f"Read {len(config.urls)} scrape targets from {table_name}")
        return config
