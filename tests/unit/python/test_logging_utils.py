"""Unit tests for structured log summaries."""

from unittest.mock import patch

from scrape_control.exceptions import ExtractionError, StoreError
from scrape_control.logging_utils import MAX_ERROR_LENGTH, log_summary


def test_minimal_summary():
    assert log_summary("read_config", "scrape-control") == {
        "operation": "read_config",
        "table_name": "scrape-control",
        "success": True,
    }


@patch("scrape_control.logging_utils.time.perf_counter", return_value=10.5)
def test_duration_from_start_time(_mock_perf_counter):
    summary = log_summary("reset_config", "scrape-control", started_at=10.0, target_count=11)

    assert summary["duration_ms"] == 500.0
    assert summary["target_count"] == 11


def test_store_error_summary():
    error = StoreError("PutItem", "Rate exceeded", error_code="ThrottlingException")

    summary = log_summary("reset_config", "scrape-control", error=error, chained=False)

    assert summary == {
        "operation": "reset_config",
        "table_name": "scrape-control",
        "success": False,
        "error_type": "StoreError",
        "error": "PutItem failed: Rate exceeded",
        "error_code": "ThrottlingException",
        "chained": False,
    }


def test_error_without_code():
    summary = log_summary("reset_config", "scrape-control", error=ExtractionError("no items"))

    assert summary["error_type"] == "ExtractionError"
    assert "error_code" not in summary


def test_error_is_truncated():
    summary = log_summary("reset_config", "scrape-control", error=ExtractionError("x" * 2000))
    assert len(summary["error"]) == MAX_ERROR_LENGTH
