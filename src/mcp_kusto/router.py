"""Dispatch of tool calls to the registered tools."""

import logging
from collections.abc import Mapping
from typing import Any

import mcp.types as types
from mcp.shared.exceptions import McpError

from .errors import ErrorKind, KustoToolError
from .event_log import EventLog, StopWatch
from .handler import resolve_target
from .settings import KustoSettings
from .tool import Tool

logger = logging.getLogger(__name__)


def _invalid_params(message: str) -> McpError:
    return McpError(types.ErrorData(code=types.INVALID_PARAMS, message=message))


class ToolRouter:
    """Maps tool names to tools and records one event per invocation.

    Parameters
    ----------
    tools : Mapping[str, Tool[Any]]
        Enabled tools keyed by name.
    defaults : KustoSettings
        Default cluster and database used for the presence check.
    event_log : EventLog
        Sink of the ``tool_invoked`` events.
    """

    def __init__(
        self,
        tools: Mapping[str, Tool[Any]],
        defaults: KustoSettings,
        event_log: EventLog,
    ) -> None:
        self._tools = tools
        self._defaults = defaults
        self._event_log = event_log

    async def call(
        self,
        name: str,
        arguments: Mapping[str, Any] | None,
    ) -> types.CallToolResult:
        """Validate the arguments of a tool call and run the tool.

        Raises
        ------
        McpError
            ``INVALID_PARAMS`` for an unknown tool name, arguments that do
            not validate, or a cluster/database that resolves neither from
            the arguments nor from the defaults.
        """
        stopwatch = StopWatch.start()
        status = "failure"
        try:
            result = await self._dispatch(name, arguments)
            if not result.isError:
                status = "success"
            return result
        finally:
            self._event_log.event(
                "tool_invoked",
                tool=name,
                status=status,
                duration_ms=round(stopwatch.elapsed_ms(), 3),
            )

    def _select(self, name: str) -> Tool[Any]:
        tool = self._tools.get(name)
        if tool is None:
            logger.warning(f"Unknown tool requested: {name}")
            raise KustoToolError(ErrorKind.UNKNOWN_TOOL, f"Unknown tool name: {name}")
        return tool

    async def _dispatch(
        self,
        name: str,
        arguments: Mapping[str, Any] | None,
    ) -> types.CallToolResult:
        try:
            tool = self._select(name)
            args = tool.parse_arguments(arguments)
            _ = resolve_target(args, self._defaults)
        except KustoToolError as e:
            raise _invalid_params(e.message) from e

        return await tool.perform(args)
