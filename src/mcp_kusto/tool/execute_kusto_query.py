import mcp.types as types

from ..handler import ExecuteQueryArgs, KustoHandler
from ._properties import TARGET_PROPERTIES
from .base import Tool


class ExecuteKustoQueryTool(Tool[ExecuteQueryArgs]):
    def __init__(self, handler: KustoHandler) -> None:
        self.handler = handler

    @property
    def name(self) -> str:
        return "execute_kusto_query"

    @property
    def args_model(self) -> type[ExecuteQueryArgs]:
        return ExecuteQueryArgs

    async def perform(self, args: ExecuteQueryArgs) -> types.CallToolResult:
        outcome = await self.handler.execute_query(args)
        return outcome.to_result()

    @property
    def definition(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description="Execute a KQL query against an Azure Data Explorer (Kusto) database and return the result rows",
            inputSchema={
                "type": "object",
                "properties": {
                    "query": {
                        "type": "string",
                        "description": "KQL query to execute",
                    },
                    **TARGET_PROPERTIES,
                },
                "required": ["query"],
            },
        )
