# wait_server.py
import asyncio
import logging
import os
import sys

from mcp import types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server

import config
from tools.base_tool import BaseTool
from tools.datetime_tool import GetDateTimeTool
from tools.wait_tool import WaitTool
from utils.interrupt_handler import InterruptHandler
from utils.logger_setup import setup_logging

logger = logging.getLogger(f"{config.SERVICE_NAME}.Server")

# How long a shutdown waits for the stdio transport to unwind before the process exits anyway
SHUTDOWN_GRACE_SECONDS = 5.0


class ToolExecutionError(Exception):
    """Raised for tool results flagged as errors; the MCP layer returns it with isError set."""


def build_tools(server_config: config.ServerConfig) -> dict[str, BaseTool]:
    tools = [WaitTool(server_config), GetDateTimeTool()]
    return {tool.name: tool for tool in tools}


def create_server(available_tools: dict[str, BaseTool]) -> Server:
    """Creates the MCP server and wires tools/list and tools/call to the given tools."""
    server = Server(config.SERVER_NAME, version=config.SERVER_VERSION)

    @server.list_tools()
    async def handle_list_tools() -> list[types.Tool]:
        return [tool.get_tool_info() for tool in available_tools.values()]

    @server.call_tool()
    async def handle_call_tool(name: str, arguments: dict | None) -> list[types.TextContent]:
        tool = available_tools.get(name)
        if tool is None:
            logger.warning(f"Call for unknown tool '{name}'.")
            raise ToolExecutionError(f"Unknown tool: {name}")
        result = await tool.execute(arguments or {})
        if result.is_error:
            raise ToolExecutionError(result.text)
        return result.to_content()

    return server


def initialization_options(server: Server) -> InitializationOptions:
    return InitializationOptions(
        server_name=config.SERVER_NAME,
        server_version=config.SERVER_VERSION,
        capabilities=server.get_capabilities(
            notification_options=NotificationOptions(),
            experimental_capabilities={},
        ),
    )


async def serve_stdio(server: Server):
    logger.info("Initializing stdio transport...")
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Connecting server to transport...")
        await server.run(read_stream, write_stream, initialization_options(server))


async def run_server(server_config: config.ServerConfig, interrupt_handler=None, serve=serve_stdio):
    """
    Serves MCP until the client disconnects or a shutdown signal arrives.
    Returns True when the transport unwound cleanly, False when it had to be abandoned.
    """
    server = create_server(build_tools(server_config))
    if interrupt_handler is None:
        interrupt_handler = InterruptHandler().install()

    serve_task = asyncio.create_task(serve(server))
    shutdown_task = asyncio.create_task(interrupt_handler.wait())
    logger.info("MCP Wait Server (Python) running on stdio. Waiting for requests...")
    try:
        done, _ = await asyncio.wait({serve_task, shutdown_task}, return_when=asyncio.FIRST_COMPLETED)
        if serve_task in done:
            serve_task.result()  # re-raises transport failures
            logger.info("Client closed the connection.")
            return True

        serve_task.cancel()
        finished, _ = await asyncio.wait({serve_task}, timeout=SHUTDOWN_GRACE_SECONDS)
        if not finished:
            logger.warning(f"Transport did not close within {SHUTDOWN_GRACE_SECONDS:.0f} seconds.")
            return False
        logger.info("Server shutdown complete.")
        return True
    finally:
        shutdown_task.cancel()
        interrupt_handler.restore()


def main() -> int:
    server_logger = setup_logging(
        log_level=config.parse_log_level(os.environ),
        log_file_path=config.parse_log_file_path(os.environ),
        service_name=config.SERVICE_NAME,
    )
    server_config = config.load_config()

    loop = asyncio.new_event_loop()
    clean = True
    try:
        clean = loop.run_until_complete(run_server(server_config))
    except KeyboardInterrupt:
        server_logger.info("Shutting down...")
        return 0
    except Exception as e:
        server_logger.error(f"Fatal error during server startup or execution: {e}", exc_info=True)
        return 1
    finally:
        if clean:
            loop.close()

    if not clean:
        # A blocked stdin read cannot be cancelled, so the loop is abandoned with it
        logging.shutdown()
        os._exit(0)
    return 0


if __name__ == "__main__":
    sys.exit(main())
