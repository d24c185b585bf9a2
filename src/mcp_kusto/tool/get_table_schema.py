import mcp.types as types

from ..handler import GetTableSchemaArgs, KustoHandler
from ._properties import TARGET_PROPERTIES
from .base import Tool


class GetTableSchemaTool(Tool[GetTableSchemaArgs]):
    def __init__(self, handler: KustoHandler) -> None:
        self.handler = handler

    @property
    def name(self) -> str:
        return "get_table_schema"

    @property
    def args_model(self) -> type[GetTableSchemaArgs]:
        return GetTableSchemaArgs

    async def perform(self, args: GetTableSchemaArgs) -> types.CallToolResult:
        outcome = await self.handler.get_table_schema(args)
        return outcome.to_result()

    @property
    def definition(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description="Retrieve the columns (name, data type, ordinal) of a table in a Kusto database",
            inputSchema={
                "type": "object",
                "properties": {
                    "table": {
                        "type": "string",
                        "description": "Name of the table to describe",
                    },
                    **TARGET_PROPERTIES,
                },
                "required": ["table"],
            },
        )
