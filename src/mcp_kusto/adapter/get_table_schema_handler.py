"""GetTableSchema EffectHandler implementation."""

from ..errors import ErrorKind, KustoToolError
from ..kernel import ClusterUrl, Database, Table, TableColumn, TableSchema
from ..kernel.kql_utils import quote_ident
from ..kusto_client import KustoClient


class GetTableSchemaEffectHandler:
    """EffectHandler for GetTableSchema operations."""

    def __init__(self, client: KustoClient) -> None:
        self.client = client

    async def get_table_schema(
        self,
        cluster: ClusterUrl,
        database: Database,
        table: Table,
    ) -> TableSchema:
        """Get the column schema of a table."""
        query = f"{quote_ident(table)} | getschema"

        results = await self.client.execute(cluster, database, query)

        try:
            # getschema returns ColumnName, ColumnOrdinal, DataType, ColumnType
            columns = [
                TableColumn(
                    name=row["ColumnName"],
                    ordinal=int(row["ColumnOrdinal"]),
                    data_type=row["DataType"],
                    column_type=row["ColumnType"],
                )
                for row in results
            ]
        except (KeyError, TypeError, ValueError) as e:
            raise KustoToolError(
                ErrorKind.EXECUTION,
                f"Unexpected getschema result for table '{table}': {e!s}",
            ) from e

        return TableSchema(
            database=database,
            name=table,
            columns=sorted(columns, key=lambda column: column.ordinal),
        )
