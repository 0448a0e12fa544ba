# tools/wait_tool.py
import asyncio
import logging
import math

import config
from .base_tool import BaseTool, ToolResult
from .duration_policy import decide, format_seconds

logger = logging.getLogger(f"{config.SERVICE_NAME}.WaitTool")

WAIT_INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "duration_seconds": {
            "type": "number",
            "description": "The number of seconds to wait.",
        }
    },
    "required": ["duration_seconds"],
}


class WaitTool(BaseTool):
    def __init__(self, server_config: config.ServerConfig, sleep=asyncio.sleep):
        super().__init__(
            name="wait",
            description=server_config.tool_description,
            input_schema=WAIT_INPUT_SCHEMA,
        )
        self.max_single_wait = server_config.max_duration_seconds
        self._sleep = sleep

    async def execute(self, arguments: dict) -> ToolResult:
        """
        Waits for up to one ceiling's worth of the requested duration.
        Args:
            arguments (dict): Must contain 'duration_seconds' (int or float) - the time to wait.
        Returns:
            ToolResult: Completion message, or the remaining duration the caller
                        has to request with another call.
        """
        requested = (arguments or {}).get("duration_seconds")
        if requested is None:
            logger.warning("Wait called without 'duration_seconds'.")
            return ToolResult("Error: 'duration_seconds' argument is missing for wait tool.", is_error=True)
        if isinstance(requested, bool) or not isinstance(requested, (int, float)):
            logger.warning(f"Wait called with non-numeric duration {requested!r}.")
            return ToolResult("Error: 'duration_seconds' must be a number.", is_error=True)

        try:
            requested = float(requested)
        except OverflowError:
            # Integers beyond float range still mean "wait a very long time"
            requested = math.inf if requested > 0 else -math.inf
        if requested < 0:
            logger.warning(f"Requested negative wait time {format_seconds(requested)} sec.")
            return ToolResult(
                f"Error: Requested duration ({format_seconds(requested)} seconds) cannot be negative.",
                is_error=True,
            )

        decision = decide(requested, self.max_single_wait)
        if decision.is_final:
            logger.info(f"Starting wait for {format_seconds(decision.actual_wait_seconds)} seconds...")
        else:
            logger.info(
                f"Request for {format_seconds(requested)}s exceeds single call limit of "
                f"{format_seconds(self.max_single_wait)}s. Waiting for {format_seconds(decision.actual_wait_seconds)}s now."
            )

        try:
            await self._sleep(decision.actual_wait_seconds)
        except (asyncio.CancelledError, Exception):
            logger.warning("Wait task failed or was cancelled.")
            raise

        logger.info(f"--- Wait interval of {format_seconds(decision.actual_wait_seconds)} seconds FINISHED. ---")

        if decision.is_final:
            logger.info(f"Total requested duration ({format_seconds(requested)}s) completed successfully.")
            return ToolResult(f"Successfully waited for {format_seconds(requested)} seconds.")

        remaining = format_seconds(decision.remaining_seconds)
        logger.info(f"Instructing model to wait for remaining {remaining} seconds.")
        return ToolResult(
            f"Waited for {format_seconds(decision.actual_wait_seconds)} seconds. "
            f"IMPORTANT: Don't do your own math, just call the wait tool again for the remaining "
            f"{remaining} seconds. It will allow to finish task without errors"
        )
