#!/usr/bin/env python3
"""
Kusto MCP Server

This server provides a Model Context Protocol (MCP) interface to Azure Data
Explorer (Kusto). It allows clients to run KQL queries, list tables and read
table schemas.
"""

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from importlib.metadata import PackageNotFoundError, version

import mcp.server.stdio
import mcp.types as types
from mcp.server import NotificationOptions, Server
from mcp.server.models import InitializationOptions
from pydantic_settings import SettingsConfigDict

from .cli import Cli
from .context import ServerContext
from .event_log import EventLog
from .settings import Settings

logger = logging.getLogger(__name__)

SERVER_NAME = "mcp-kusto"

server = Server(SERVER_NAME)
server_context = ServerContext()


def server_version() -> str:
    """Return the installed distribution version, ``0.1.0`` when not installed."""
    try:
        return version(SERVER_NAME)
    except PackageNotFoundError:
        return "0.1.0"


@server.list_tools()
async def handle_list_tools() -> list[types.Tool]:
    """List available tools."""
    return [tool.definition for tool in server_context.tools()]


async def handle_call_tool(request: types.CallToolRequest) -> types.ServerResult:
    """Handle tool calls.

    Registered as a raw request handler so that the router validates the
    arguments and records the invocation itself. An ``McpError`` raised by
    the router reaches the session and is answered as a JSON-RPC error.
    """
    result = await server_context.router.call(
        request.params.name,
        request.params.arguments,
    )
    return types.ServerResult(result)


server.request_handlers[types.CallToolRequest] = handle_call_tool


async def main() -> None:
    """Run the main entry point for the MCP server."""

    cli = Cli()

    settings_config = SettingsConfigDict(
        env_nested_delimiter="__",
        toml_file=cli.config,
    )
    settings = Settings.build(settings_config)
    logging.getLogger().setLevel(settings.logging.level)

    executor = ThreadPoolExecutor(thread_name_prefix=SERVER_NAME)
    event_log = EventLog(
        settings.logging.event_log_file,
        dimensions={"server": SERVER_NAME, "version": server_version()},
    )
    try:
        with event_log:
            server_context.prepare(
                executor,
                settings.kusto,
                settings.tools,
                event_log,
            )
            await server_context.initialize()

            async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
                await server.run(
                    read_stream,
                    write_stream,
                    InitializationOptions(
                        server_name=SERVER_NAME,
                        server_version=server_version(),
                        capabilities=server.get_capabilities(
                            notification_options=NotificationOptions(),
                            experimental_capabilities={},
                        ),
                    ),
                )
    finally:
        # In-flight queries are abandoned rather than awaited
        executor.shutdown(wait=False, cancel_futures=True)
        server_context.close()


def run() -> None:
    """Console script entry point."""
    logging.basicConfig(level=logging.INFO)
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        logger.info("Shutting down server...")


if __name__ == "__main__":
    run()
