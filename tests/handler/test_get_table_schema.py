import pytest
from azure.core.exceptions import ClientAuthenticationError
from pydantic import ValidationError

from mcp_kusto.errors import ErrorKind
from mcp_kusto.handler import (
    GetTableSchemaArgs,
    QueryInput,
    QueryTarget,
    handle_get_table_schema,
)
from mcp_kusto.kernel import ClusterUrl, Database, Table, TableSchema

from ..mock_effect_handler import MockGetTableSchema

TARGET = QueryTarget(
    cluster=ClusterUrl("https://help.kusto.windows.net"),
    database=Database("Samples"),
)
QUERY_INPUT: QueryInput = {
    "clusterUrl": "https://help.kusto.windows.net",
    "database": "Samples",
    "table": "StormEvents",
}


class TestGetTableSchemaArgs:
    def test_valid_args(self) -> None:
        args = GetTableSchemaArgs.model_validate({"table": "StormEvents"})
        assert args.table == "StormEvents"

    def test_missing_table(self) -> None:
        with pytest.raises(ValidationError):
            _ = GetTableSchemaArgs.model_validate({"database": "Samples"})

    def test_empty_table(self) -> None:
        with pytest.raises(ValidationError):
            _ = GetTableSchemaArgs.model_validate({"table": ""})


class TestHandleGetTableSchema:
    @pytest.mark.asyncio
    async def test_success(self) -> None:
        effect_handler = MockGetTableSchema()

        outcome = await handle_get_table_schema(
            GetTableSchemaArgs(table=Table("StormEvents")),
            TARGET,
            QUERY_INPUT,
            effect_handler,
        )

        assert outcome.success
        assert effect_handler.called_with_table == "StormEvents"
        assert outcome.message == "Retrieved 2 columns for table 'StormEvents'."
        assert outcome.data == [
            {
                "name": "StartTime",
                "ordinal": 0,
                "data_type": "System.DateTime",
                "column_type": "datetime",
            },
            {
                "name": "State",
                "ordinal": 1,
                "data_type": "System.String",
                "column_type": "string",
            },
        ]

    @pytest.mark.asyncio
    async def test_table_without_columns(self) -> None:
        schema = TableSchema(database=Database("Samples"), name=Table("Empty"), columns=[])

        outcome = await handle_get_table_schema(
            GetTableSchemaArgs(table=Table("Empty")),
            TARGET,
            QUERY_INPUT,
            MockGetTableSchema(result_data=schema),
        )

        assert outcome.data == []
        assert outcome.message == "Retrieved 0 columns for table 'Empty'."

    @pytest.mark.asyncio
    async def test_authentication_error(self) -> None:
        effect_handler = MockGetTableSchema(
            should_raise=ClientAuthenticationError("AzureCliCredential authentication unavailable")
        )

        outcome = await handle_get_table_schema(
            GetTableSchemaArgs(table=Table("StormEvents")),
            TARGET,
            QUERY_INPUT,
            effect_handler,
        )

        assert outcome.error_kind is ErrorKind.AUTHENTICATION
        envelope = outcome.to_envelope()
        assert envelope["input"]["table"] == "StormEvents"
        assert "authentication unavailable" in envelope["error"]
