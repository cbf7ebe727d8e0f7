"""Shared fixtures for scrape_control unit tests.

Provides an in-memory DynamoDB double (client + resource) that raises the
same botocore ClientError codes as the real service, and navigation page
markup samples.
"""

import copy
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from scrape_control.store import DynamoDBStore


def make_client_error(code: str, operation: str, message: str = "") -> ClientError:
    """Build a botocore ClientError with the given error code."""
    return ClientError({"Error": {"Code": code, "Message": message or code}}, operation)


class FakeDynamoDBClient:
    """In-memory stand-in for boto3.client("dynamodb") table operations."""

    def __init__(self):
        self.tables: dict[str, dict] = {}
        self.items: dict[str, dict[str, dict]] = {}
        self.waiter = MagicMock()

    def describe_table(self, TableName):
        if TableName not in self.tables:
            raise make_client_error(
                "ResourceNotFoundException", "DescribeTable", f"Table {TableName} not found"
            )
        return {"Table": self.tables[TableName]}

    def create_table(self, TableName, KeySchema, AttributeDefinitions, ProvisionedThroughput):
        if TableName in self.tables:
            raise make_client_error(
                "ResourceInUseException", "CreateTable", f"Table already exists: {TableName}"
            )
        description = {
            "TableName": TableName,
            "TableStatus": "ACTIVE",
            "KeySchema": KeySchema,
            "AttributeDefinitions": AttributeDefinitions,
            "ProvisionedThroughput": ProvisionedThroughput,
        }
        self.tables[TableName] = description
        self.items[TableName] = {}
        return {"TableDescription": description}

    def delete_table(self, TableName):
        if TableName not in self.tables:
            raise make_client_error(
                "ResourceNotFoundException", "DeleteTable", f"Table {TableName} not found"
            )
        description = self.tables.pop(TableName)
        self.items.pop(TableName, None)
        return {"TableDescription": description}

    def get_waiter(self, name):
        return self.waiter


class FakeTable:
    """In-memory stand-in for a boto3 DynamoDB Table resource."""

    def __init__(self, client: FakeDynamoDBClient, name: str):
        self.client = client
        self.name = name

    def _items(self, operation):
        if self.name not in self.client.items:
            raise make_client_error(
                "ResourceNotFoundException", operation, "Requested resource not found"
            )
        return self.client.items[self.name]

    def put_item(self, Item):
        self._items("PutItem")[Item["id"]] = copy.deepcopy(Item)
        return {"ResponseMetadata": {"HTTPStatusCode": 200}}

    def get_item(self, Key, ConsistentRead=False, ProjectionExpression=None,
                 ExpressionAttributeNames=None):
        item = self._items("GetItem").get(Key["id"])
        response = {"ResponseMetadata": {"HTTPStatusCode": 200}}
        if item is None:
            return response

        if ProjectionExpression:
            names = [
                (ExpressionAttributeNames or {}).get(token.strip(), token.strip())
                for token in ProjectionExpression.split(",")
            ]
            item = {name: item[name] for name in names if name in item}

        response["Item"] = copy.deepcopy(item)
        return response


class FakeDynamoDBResource:
    """In-memory stand-in for boto3.resource("dynamodb")."""

    def __init__(self, client: FakeDynamoDBClient):
        self.client = client

    def Table(self, name):
        return FakeTable(self.client, name)


@pytest.fixture
def fake_dynamodb_client():
    """Empty in-memory DynamoDB."""
    return FakeDynamoDBClient()


@pytest.fixture
def fake_store(fake_dynamodb_client):
    """DynamoDBStore backed by the in-memory DynamoDB."""
    return DynamoDBStore(
        client=fake_dynamodb_client,
        resource=FakeDynamoDBResource(fake_dynamodb_client),
    )


@pytest.fixture
def navigation_html():
    """Category page with four items in the current navigation section."""
    return """
    <html>
        <head><title>Groceries</title></head>
        <body>
            <nav class="menu">
                <ul>
                    <li class="menu-item"><a href="/groceries/en-GB/offers">Offers</a></li>
                    <li class="menu-item current">
                        <a href="/groceries/en-GB/shop">Shop</a>
                        <ul class="submenu">
                            <li><a href="/groceries/en-GB/shop/fresh-food/all">Fresh Food</a></li>
                            <li><a href="/groceries/en-GB/shop/bakery/all">Bakery</a></li>
                            <li>
                                <a href="https://www.tesco.com/groceries/en-GB/shop/frozen-food/all">
                                    Frozen <span>Food</span>
                                </a>
                            </li>
                            <li><a href="drinks/all">Drinks</a></li>
                        </ul>
                    </li>
                </ul>
            </nav>
        </body>
    </html>
    """


@pytest.fixture
def empty_navigation_html():
    """Category page whose navigation has no current section."""
    return """
    <html>
        <body>
            <nav class="menu">
                <ul>
                    <li class="menu-item"><a href="/groceries/en-GB/offers">Offers</a></li>
                </ul>
            </nav>
        </body>
    </html>
    """
