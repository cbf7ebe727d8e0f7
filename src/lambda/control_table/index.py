"""
Control Table Lambda

Manages the scrape control table on behalf of the scrape orchestration.

Input event:
{
    "action": "create" | "reset" | "read" | "delete",
    "table_name": "scrape-control"   # optional, defaults to CONTROL_TABLE_NAME
}

Output:
{
    "action": "reset",
    "table_name": "scrape-control",
    ...action specific fields
}
"""

import json
import logging
import os

from scrape_control import ControlTableManager, ControlTableSettings, NotFoundError

logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO"))

ACTIONS = ("create", "reset", "read", "delete")


def lambda_handler(event, context):
    """
    Main Lambda handler - dispatches a control table action.
    """
    logger.info(f"Control table event: {json.dumps(event)}")

    action = event.get("action")
    if action not in ACTIONS:
        raise ValueError(f"action must be one of {list(ACTIONS)}, got {action!r}")

    settings = ControlTableSettings.from_env()
    table_name = settings.require_table_name(event.get("table_name"))
    manager = ControlTableManager.from_settings(settings)

    result = {"action": action, "table_name": table_name}

    if action == "create":
        result["created"] = manager.create_control_table_if_doesnt_exist(table_name)

    elif action == "reset":
        # The follow-up read is eventually consistent, so report the ack only
        ack = manager.reset_config(table_name)
        result["reset"] = True
        result["status_code"] = ack.get("ResponseMetadata", {}).get("HTTPStatusCode")

    elif action == "read":
        try:
            config = manager.read_config_from_control_table(table_name)
        except NotFoundError:
            result["found"] = False
            result["config"] = None
            return result
        result["found"] = True
        result["config"] = config.to_dict()

    elif action == "delete":
        result["deleted"] = manager.delete_control_table(table_name)

    logger.info(f"Control table action complete: {json.dumps(result, default=str)}")
    return result
