import mcp.types as types

from ..handler import KustoHandler, ListTablesArgs
from ._properties import TARGET_PROPERTIES
from .base import Tool


class ListTablesTool(Tool[ListTablesArgs]):
    def __init__(self, handler: KustoHandler) -> None:
        self.handler = handler

    @property
    def name(self) -> str:
        return "list_tables"

    @property
    def args_model(self) -> type[ListTablesArgs]:
        return ListTablesArgs

    async def perform(self, args: ListTablesArgs) -> types.CallToolResult:
        outcome = await self.handler.list_tables(args)
        return outcome.to_result()

    @property
    def definition(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description="Retrieve the list of tables in a Kusto database",
            inputSchema={
                "type": "object",
                "properties": {**TARGET_PROPERTIES},
                "required": [],
            },
        )
