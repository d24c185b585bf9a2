import logging
from typing import Protocol, TypedDict

from pydantic import Field

from ..errors import KustoToolError
from ..kernel import ClusterUrl, Database, Table, TableSchema
from ._envelope import HandlerOutcome, QueryInput
from ._target import QueryTarget, TargetArgs

logger = logging.getLogger(__name__)


class ColumnDict(TypedDict):
    """TypedDict for column information in JSON response."""

    name: str
    ordinal: int
    data_type: str
    column_type: str


class GetTableSchemaArgs(TargetArgs):
    table: Table = Field(min_length=1)


class EffectGetTableSchema(Protocol):
    async def get_table_schema(
        self,
        cluster: ClusterUrl,
        database: Database,
        table: Table,
    ) -> TableSchema: ...


async def handle_get_table_schema(
    args: GetTableSchemaArgs,
    target: QueryTarget,
    query_input: QueryInput,
    effect_handler: EffectGetTableSchema,
) -> HandlerOutcome:
    """Handle get_table_schema tool call."""
    try:
        schema = await effect_handler.get_table_schema(
            target.cluster,
            target.database,
            args.table,
        )
    except Exception as e:
        logger.exception("Error retrieving table schema")
        return HandlerOutcome.failed(query_input, KustoToolError.from_exception(e))

    columns_dict: list[ColumnDict] = [
        {
            "name": col.name,
            "ordinal": col.ordinal,
            "data_type": col.data_type,
            "column_type": col.column_type,
        }
        for col in schema.columns
    ]

    return HandlerOutcome.succeeded(
        query_input,
        list(columns_dict),
        f"Retrieved {schema.column_count} columns for table '{schema.name}'.",
    )
