import logging
from typing import Any, Protocol

from pydantic import Field

from ..errors import KustoToolError
from ..json_converter import KustoJsonConverter
from ..kernel import ClusterUrl, Database, DataProcessingResult
from ._envelope import HandlerOutcome, QueryInput
from ._target import QueryTarget, TargetArgs

logger = logging.getLogger(__name__)


class ExecuteQueryArgs(TargetArgs):
    query: str = Field(min_length=1)


class EffectExecuteQuery(Protocol):
    async def execute_query(
        self,
        cluster: ClusterUrl,
        database: Database,
        query: str,
    ) -> list[dict[str, Any]]:
        """Run a KQL query and return its primary result rows.

        Raises
        ------
        ClientAuthenticationError
            If no credential can be acquired for the cluster
        KustoError
            Service or client side query failures
        KustoToolError
            If the result payload is malformed
        ContractViolationError
            For any unexpected failure
        """
        ...


async def handle_execute_query(
    args: ExecuteQueryArgs,
    target: QueryTarget,
    query_input: QueryInput,
    effect_handler: EffectExecuteQuery,
    json_converter: KustoJsonConverter,
) -> HandlerOutcome:
    """
    Handle execute_kusto_query tool call.

    Parameters
    ----------
    args : ExecuteQueryArgs
        Arguments for the query execution
    target : QueryTarget
        Resolved cluster and database
    query_input : QueryInput
        Input echo included in the response
    effect_handler : EffectExecuteQuery
        Handler for Kusto operations
    json_converter : KustoJsonConverter
        Converter making row values JSON-safe

    Returns
    -------
    HandlerOutcome
        Rows and a row count message, or the tagged error
    """
    try:
        raw_rows = await effect_handler.execute_query(
            target.cluster,
            target.database,
            args.query,
        )
    except Exception as e:
        logger.exception("Error executing query")
        return HandlerOutcome.failed(query_input, KustoToolError.from_exception(e))

    result = DataProcessingResult.from_raw_rows(json_converter, raw_rows)

    return HandlerOutcome.succeeded(
        query_input,
        list(result.processed_rows),
        f"Query executed successfully. Retrieved {result.row_count} rows.",
        result.warnings,
    )
