"""Server context for managing the Kusto client, handler and tools."""

from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from .adapter import (
    ExecuteQueryEffectHandler,
    GetTableSchemaEffectHandler,
    ListTablesEffectHandler,
)
from .event_log import EventLog
from .handler import KustoHandler
from .json_converter import KustoJsonConverter
from .kusto_client import KustoClient
from .router import ToolRouter
from .settings import KustoSettings, ToolsSettings
from .tool import ExecuteKustoQueryTool, GetTableSchemaTool, ListTablesTool, Tool


class ServerContext:
    """Context for managing the Kusto client, handler and tools."""

    def __init__(self) -> None:
        self._kusto_client: KustoClient | None = None
        self._handler: KustoHandler | None = None
        self._router: ToolRouter | None = None
        self._json_converter = KustoJsonConverter()
        self._tools: dict[str, Tool[Any]] = {}

    def prepare(
        self,
        thread_pool_executor: ThreadPoolExecutor,
        kusto_settings: KustoSettings,
        tools_settings: ToolsSettings,
        event_log: EventLog,
    ) -> None:
        """Prepare the server context with client, handler and tools.

        Parameters
        ----------
        thread_pool_executor : ThreadPoolExecutor
            Executor running the blocking SDK calls.
        kusto_settings : KustoSettings
            Connection defaults and request settings.
        tools_settings : ToolsSettings
            Configuration specifying which tools should be enabled.
        event_log : EventLog
            Sink of the invocation events.
        """
        self._kusto_client = KustoClient(thread_pool_executor, kusto_settings)
        self._handler = KustoHandler(
            kusto_settings,
            execute_query_effect=ExecuteQueryEffectHandler(self._kusto_client),
            list_tables_effect=ListTablesEffectHandler(self._kusto_client),
            get_table_schema_effect=GetTableSchemaEffectHandler(self._kusto_client),
            json_converter=self._json_converter,
        )

        all_tools: list[Tool[Any]] = [
            ExecuteKustoQueryTool(self._handler),
            GetTableSchemaTool(self._handler),
            ListTablesTool(self._handler),
        ]

        enabled_tool_names = tools_settings.enabled_tool_names()
        self._tools = {tool.name: tool for tool in all_tools if tool.name in enabled_tool_names}
        self._router = ToolRouter(self._tools, kusto_settings, event_log)

    async def initialize(self) -> None:
        """Initialize the handler. Must run after :meth:`prepare`."""
        if self._handler is None:
            raise RuntimeError("ServerContext.prepare() must be called first")
        await self._handler.initialize()

    def is_available(self) -> bool:
        """Check if the context is available for use.

        Returns
        -------
        bool
            True once the handler is initialized, False otherwise.
        """
        return self._handler is not None and self._handler.is_initialized

    @property
    def router(self) -> ToolRouter:
        if self._router is None:
            raise RuntimeError("ServerContext.prepare() must be called first")
        return self._router

    def tools(self) -> Iterator[Tool[Any]]:
        """Get an iterator over all enabled tools."""
        yield from self._tools.values()

    def tool_names(self) -> Iterator[str]:
        yield from self._tools.keys()

    def close(self) -> None:
        """Close the cached Kusto connection."""
        if self._kusto_client is not None:
            self._kusto_client.close()
