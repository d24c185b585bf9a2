"""Tests for ListTablesEffectHandler."""

from unittest.mock import AsyncMock, Mock

import pytest

from mcp_kusto.adapter import ListTablesEffectHandler
from mcp_kusto.adapter.list_tables_handler import LIST_TABLES_COMMAND
from mcp_kusto.errors import ErrorKind, KustoToolError
from mcp_kusto.kernel import ClusterUrl, Database, Table, TableSummary

CLUSTER = ClusterUrl("https://help.kusto.windows.net")
DATABASE = Database("Samples")


class TestListTablesEffectHandler:
    @pytest.mark.asyncio
    async def test_runs_show_tables(self) -> None:
        mock_client = Mock()
        mock_client.execute = AsyncMock(return_value=[])
        handler = ListTablesEffectHandler(mock_client)

        tables = await handler.list_tables(CLUSTER, DATABASE)

        assert tables == []
        mock_client.execute.assert_awaited_once_with(CLUSTER, DATABASE, LIST_TABLES_COMMAND)
        assert LIST_TABLES_COMMAND == ".show tables"

    @pytest.mark.asyncio
    async def test_maps_and_sorts_rows(self) -> None:
        mock_client = Mock()
        mock_client.execute = AsyncMock(
            return_value=[
                {
                    "TableName": "StormEvents",
                    "DatabaseName": "Samples",
                    "Folder": "Storm",
                    "DocString": "US storm events",
                },
                {
                    "TableName": "PopulationData",
                    "DatabaseName": "Samples",
                    "Folder": "",
                    "DocString": "",
                },
            ]
        )
        handler = ListTablesEffectHandler(mock_client)

        tables = await handler.list_tables(CLUSTER, DATABASE)

        assert tables == [
            TableSummary(name=Table("PopulationData"), database=DATABASE),
            TableSummary(
                name=Table("StormEvents"),
                database=DATABASE,
                folder="Storm",
                doc_string="US storm events",
            ),
        ]

    @pytest.mark.asyncio
    async def test_database_name_defaults_to_requested_database(self) -> None:
        mock_client = Mock()
        mock_client.execute = AsyncMock(return_value=[{"TableName": "T"}])
        handler = ListTablesEffectHandler(mock_client)

        tables = await handler.list_tables(CLUSTER, DATABASE)

        assert tables[0].database == "Samples"

    @pytest.mark.asyncio
    async def test_row_without_table_name(self) -> None:
        mock_client = Mock()
        mock_client.execute = AsyncMock(return_value=[{"DatabaseName": "Samples"}])
        handler = ListTablesEffectHandler(mock_client)

        with pytest.raises(KustoToolError) as exc_info:
            _ = await handler.list_tables(CLUSTER, DATABASE)

        assert exc_info.value.kind is ErrorKind.EXECUTION
        assert "missing TableName" in exc_info.value.message
