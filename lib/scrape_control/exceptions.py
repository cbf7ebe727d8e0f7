"""
Custom exceptions for the scrape control table.

Each failure kind gets its own class so callers can tell a missing record
from a backend failure without inspecting botocore error codes.
"""


class ControlTableError(Exception):
    """Base exception for control table operations."""


class StoreError(ControlTableError):
    """Backend or transport failure from DynamoDB."""

    def __init__(self, operation: str, message: str, error_code: str | None = None):
        self.operation = operation
        self.error_code = error_code
        super().__init__(f"{operation} failed: {message}")


class NotFoundError(ControlTableError):
    """Requested table or record does not exist."""

    def __init__(self, resource: str, message: str | None = None):
        self.resource = resource
        super().__init__(message or f"{resource} not found")


class FetchError(ControlTableError):
    """Network or HTTP failure retrieving the category page."""

    def __init__(self, url: str, message: str, status_code: int | None = None):
        self.url = url
        self.status_code = status_code
        super().__init__(f"Failed to fetch {url}: {message}")


class ExtractionError(ControlTableError):
    """Page markup did not match the expected navigation structure."""


class MalformedRecordError(StoreError):
    """Stored control record does not decode into a scraping config."""

    def __init__(self, message: str):
        super().__init__("ReadConfig", f"Malformed control record: {message}")
