import logging

from ..errors import ErrorKind, KustoToolError
from ..json_converter import KustoJsonConverter
from ..settings import KustoSettings
from ._envelope import HandlerOutcome, QueryInput
from ._target import QueryTarget, TargetArgs, echo_input, resolve_target
from .execute_query import EffectExecuteQuery, ExecuteQueryArgs, handle_execute_query
from .get_table_schema import (
    EffectGetTableSchema,
    GetTableSchemaArgs,
    handle_get_table_schema,
)
from .list_tables import EffectListTables, ListTablesArgs, handle_list_tables

logger = logging.getLogger(__name__)

NOT_INITIALIZED_MESSAGE = "KustoHandler not initialized. Call initialize() first."


class KustoHandler:
    """Entry point of the Kusto operations.

    Owns the initialization state and the connection defaults, resolves the
    query target of each call and turns every failure into a
    :class:`HandlerOutcome`. No operation raises.

    Parameters
    ----------
    defaults : KustoSettings
        Default cluster and database used when a call omits them.
    execute_query_effect : EffectExecuteQuery
        Runs KQL queries.
    list_tables_effect : EffectListTables
        Lists tables of a database.
    get_table_schema_effect : EffectGetTableSchema
        Reads the column schema of a table.
    json_converter : KustoJsonConverter
        Converter making query result values JSON-safe.
    """

    def __init__(
        self,
        defaults: KustoSettings,
        *,
        execute_query_effect: EffectExecuteQuery,
        list_tables_effect: EffectListTables,
        get_table_schema_effect: EffectGetTableSchema,
        json_converter: KustoJsonConverter,
    ) -> None:
        self.defaults = defaults
        self._execute_query_effect = execute_query_effect
        self._list_tables_effect = list_tables_effect
        self._get_table_schema_effect = get_table_schema_effect
        self._json_converter = json_converter
        self._initialized = False

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        if self._initialized:
            return
        self._initialized = True
        logger.info("KustoHandler initialized successfully")

    def _prepare(self, args: TargetArgs) -> QueryTarget:
        if not self._initialized:
            raise KustoToolError(ErrorKind.NOT_INITIALIZED, NOT_INITIALIZED_MESSAGE)
        return resolve_target(args, self.defaults)

    def _reject(self, query_input: QueryInput, error: KustoToolError) -> HandlerOutcome:
        logger.warning(f"Rejected before execution ({error.kind}): {error}")
        return HandlerOutcome.failed(query_input, error)

    async def execute_query(self, args: ExecuteQueryArgs) -> HandlerOutcome:
        query_input = echo_input(args, self.defaults)
        query_input["query"] = args.query
        try:
            target = self._prepare(args)
        except KustoToolError as e:
            return self._reject(query_input, e)

        return await handle_execute_query(
            args,
            target,
            query_input,
            self._execute_query_effect,
            self._json_converter,
        )

    async def list_tables(self, args: ListTablesArgs) -> HandlerOutcome:
        query_input = echo_input(args, self.defaults)
        try:
            target = self._prepare(args)
        except KustoToolError as e:
            return self._reject(query_input, e)

        return await handle_list_tables(target, query_input, self._list_tables_effect)

    async def get_table_schema(self, args: GetTableSchemaArgs) -> HandlerOutcome:
        query_input = echo_input(args, self.defaults)
        query_input["table"] = args.table
        try:
            target = self._prepare(args)
        except KustoToolError as e:
            return self._reject(query_input, e)

        return await handle_get_table_schema(
            args,
            target,
            query_input,
            self._get_table_schema_effect,
        )
