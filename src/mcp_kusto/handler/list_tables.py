import logging
from typing import Protocol, TypedDict

from ..errors import KustoToolError
from ..kernel import ClusterUrl, Database, TableSummary
from ._envelope import HandlerOutcome, QueryInput
from ._target import QueryTarget, TargetArgs

logger = logging.getLogger(__name__)


class TableDict(TypedDict):
    """TypedDict for one table entry in JSON response."""

    name: str
    database: str
    folder: str | None
    doc_string: str | None


class ListTablesArgs(TargetArgs):
    pass


class EffectListTables(Protocol):
    async def list_tables(
        self,
        cluster: ClusterUrl,
        database: Database,
    ) -> list[TableSummary]: ...


async def handle_list_tables(
    target: QueryTarget,
    query_input: QueryInput,
    effect_handler: EffectListTables,
) -> HandlerOutcome:
    """Handle list_tables tool call."""
    try:
        tables = await effect_handler.list_tables(target.cluster, target.database)
    except Exception as e:
        logger.exception("Error listing tables")
        return HandlerOutcome.failed(query_input, KustoToolError.from_exception(e))

    tables_dict: list[TableDict] = [
        {
            "name": table.name,
            "database": table.database,
            "folder": table.folder,
            "doc_string": table.doc_string,
        }
        for table in tables
    ]

    return HandlerOutcome.succeeded(
        query_input,
        list(tables_dict),
        f"Retrieved {len(tables_dict)} tables.",
    )
