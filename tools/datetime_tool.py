# tools/datetime_tool.py
import logging

import config
from utils.timestamps import current_iso_timestamp
from .base_tool import BaseTool, ToolResult

logger = logging.getLogger(f"{config.SERVICE_NAME}.DateTimeTool")


class GetDateTimeTool(BaseTool):
    def __init__(self):
        super().__init__(
            name="get_datetime",
            description="Returns the current date and time in ISO 8601 format (e.g., 2025-06-11T17:12:50.455Z).",
        )

    async def execute(self, arguments: dict) -> ToolResult:
        current_datetime = current_iso_timestamp()
        logger.info(f"Tool 'get_datetime' called. Returning: {current_datetime}")
        return ToolResult(current_datetime)
