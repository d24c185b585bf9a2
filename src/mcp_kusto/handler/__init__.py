from ._envelope import Envelope, HandlerOutcome, QueryInput
from ._target import (
    CLUSTER_REQUIRED_MESSAGE,
    DATABASE_REQUIRED_MESSAGE,
    QueryTarget,
    TargetArgs,
    resolve_target,
)
from .execute_query import (
    EffectExecuteQuery,
    ExecuteQueryArgs,
    handle_execute_query,
)
from .get_table_schema import (
    EffectGetTableSchema,
    GetTableSchemaArgs,
    handle_get_table_schema,
)
from .kusto_handler import NOT_INITIALIZED_MESSAGE, KustoHandler
from .list_tables import EffectListTables, ListTablesArgs, handle_list_tables

__all__ = [
    "CLUSTER_REQUIRED_MESSAGE",
    "DATABASE_REQUIRED_MESSAGE",
    "NOT_INITIALIZED_MESSAGE",
    "EffectExecuteQuery",
    "EffectGetTableSchema",
    "EffectListTables",
    "Envelope",
    "ExecuteQueryArgs",
    "GetTableSchemaArgs",
    "HandlerOutcome",
    "KustoHandler",
    "ListTablesArgs",
    "QueryInput",
    "QueryTarget",
    "TargetArgs",
    "handle_execute_query",
    "handle_get_table_schema",
    "handle_list_tables",
]
