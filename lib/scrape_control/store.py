"""
DynamoDB adapter for the control table.

Wraps the boto3 client (table operations) and resource (item operations,
which handle attribute marshalling) behind a small interface, and turns
botocore errors into NotFoundError / StoreError.
"""

import logging
from typing import Any, Callable, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from scrape_control.constants import RESOURCE_NOT_FOUND
from scrape_control.exceptions import NotFoundError, StoreError

logger = logging.getLogger(__name__)


def translate_error(operation: str, resource: str, error: Exception) -> Exception:
    """
    Map a botocore error to the package error taxonomy.

    Args:
        operation: DynamoDB operation name, e.g. "DescribeTable"
        resource: Table or item the operation targeted
        error: The botocore exception

    Returns:
        NotFoundError for ResourceNotFoundException, StoreError otherwise
    """
    if isinstance(error, ClientError):
        details = error.response.get("Error", {})
        code = details.get("Code", "")
        if code == RESOURCE_NOT_FOUND:
            return NotFoundError(resource, f"{resource} not found ({operation})")
        return StoreError(operation, details.get("Message") or str(error), error_code=code)

    return StoreError(operation, str(error))


class DynamoDBStore:
    """
    Key-value store backed by DynamoDB.

    Usage:
        store = DynamoDBStore(region_name="eu-west-1")
        store.put_item("control-table", {"id": "scrapingconfig", ...})

    Clients are passed in or created per instance, never shared at module
    level, so tests can hand in mocks.
    """

    def __init__(self, client=None, resource=None, region_name: Optional[str] = None):
        self.region_name = region_name
        self.client = client or boto3.client("dynamodb", region_name=region_name)
        self.resource = resource or boto3.resource("dynamodb", region_name=region_name)

    @classmethod
    def from_settings(cls, settings) -> "DynamoDBStore":
        """Create a store for the region in ControlTableSettings."""
        return cls(region_name=settings.region)

    def _call(self, operation: str, resource: str, func: Callable[..., Any], **kwargs) -> Any:
        try:
            return func(**kwargs)
        except (ClientError, BotoCoreError) as e:
            raise translate_error(operation, resource, e) from e

    # ========================================================================
    # Table operations
    # ========================================================================

    def describe_table(self, table_name: str) -> dict[str, Any]:
        """
        Describe a table.

        Raises:
            NotFoundError: If the table does not exist
            StoreError: On any other backend failure
        """
        response = self._call(
            "DescribeTable", table_name, self.client.describe_table, TableName=table_name
        )
        return response.get("Table", {})

    def create_table(
        self,
        table_name: str,
        key_schema: list[dict[str, str]],
        attribute_definitions: list[dict[str, str]],
        provisioned_throughput: dict[str, int],
        wait: bool = False,
    ) -> dict[str, Any]:
        """
        Create a table, optionally waiting until it is ACTIVE.

        Raises:
            StoreError: If creation or the waiter fails
        """
        response = self._call(
            "CreateTable",
            table_name,
            self.client.create_table,
            TableName=table_name,
            KeySchema=key_schema,
            AttributeDefinitions=attribute_definitions,
            ProvisionedThroughput=provisioned_throughput,
        )
        logger.info(f"Requested creation of table {table_name}")

        if wait:
            waiter = self.client.get_waiter("table_exists")
            self._call("WaitTableExists", table_name, waiter.wait, TableName=table_name)
            logger.info(f"Table {table_name} is active")

        return response.get("TableDescription", {})

    def delete_table(self, table_name: str) -> dict[str, Any]:
        """
        Delete a table.

        Raises:
            NotFoundError: If the table does not exist
            StoreError: On any other backend failure
        """
        response = self._call(
            "DeleteTable", table_name, self.client.delete_table, TableName=table_name
        )
        return response.get("TableDescription", {})

    # ========================================================================
    # Item operations
    # ========================================================================

    def put_item(self, table_name: str, item: dict[str, Any]) -> dict[str, Any]:
        """Write an item, replacing any item with the same key."""
        table = self.resource.Table(table_name)
        return self._call("PutItem", table_name, table.put_item, Item=item)

    def get_item(
        self,
        table_name: str,
        key: dict[str, Any],
        attributes: Optional[list[str]] = None,
        consistent_read: bool = False,
    ) -> Optional[dict[str, Any]]:
        """
        Read an item by key.

        Args:
            table_name: Table to read from
            key: Primary key of the item
            attributes: Attribute names to project, all attributes if None
            consistent_read: Use a strongly consistent read

        Returns:
            The item, or None if no item has this key
        """
        table = self.resource.Table(table_name)
        params: dict[str, Any] = {"Key": key, "ConsistentRead": consistent_read}

        if attributes:
            names = {f"#a{i}": name for i, name in enumerate(attributes)}
            params["ProjectionExpression"] = ", ".join(names)
            params["ExpressionAttributeNames"] = names

        response = self._call("GetItem", table_name, table.get_item, **params)
        return response.get("Item")
