"""
Logging helpers for control table operations.

Every control table operation logs one summary line with the same keys,
whether it succeeded or failed, so runs can be compared in CloudWatch.
"""

import time
from typing import Any

# Errors from DynamoDB or the page fetch can be long; keep log lines bounded
MAX_ERROR_LENGTH = 500


def log_summary(
    operation: str,
    table_name: str,
    *,
    started_at: float | None = None,
    target_count: int | None = None,
    error: BaseException | None = None,
    **kwargs: str | int | float | bool,
) -> dict[str, Any]:
    """
    Create a structured summary of a control table operation.

    Args:
        operation: Operation name (e.g., "reset_config")
        table_name: Control table the operation ran against
        started_at: time.perf_counter() value taken when the operation began
        target_count: Number of scrape targets written or read
        error: The exception that ended the operation, None on success
        **kwargs: Extra scalar fields such as config_source or chained

    Example:
        ```python
        start = time.perf_counter()
        ...
        logger.info(log_summary(
            "reset_config", "scrape-control", started_at=start, target_count=11
        ))
        ```
    """
    summary: dict[str, Any] = {
        "operation": operation,
        "table_name": table_name,
        "success": error is None,
    }

    if started_at is not None:
        summary["duration_ms"] = round((time.perf_counter() - started_at) * 1000, 2)

    if target_count is not None:
        summary["target_count"] = target_count

    if error is not None:
        summary["error_type"] = type(error).__name__
        summary["error"] = str(error)[:MAX_ERROR_LENGTH]
        error_code = getattr(error, "error_code", None)
        if error_code:
            summary["error_code"] = error_code

    summary.update(kwargs)
    return summary
