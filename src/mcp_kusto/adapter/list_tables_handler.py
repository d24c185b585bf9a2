"""ListTables EffectHandler implementation."""

from ..errors import ErrorKind, KustoToolError
from ..kernel import ClusterUrl, Database, Table, TableSummary
from ..kusto_client import KustoClient

LIST_TABLES_COMMAND = ".show tables"


class ListTablesEffectHandler:
    """EffectHandler for ListTables operations."""

    def __init__(self, client: KustoClient) -> None:
        self.client = client

    async def list_tables(
        self,
        cluster: ClusterUrl,
        database: Database,
    ) -> list[TableSummary]:
        """Get the tables of a database, sorted by name."""
        results = await self.client.execute(cluster, database, LIST_TABLES_COMMAND)

        tables: list[TableSummary] = []
        for row in results:
            # .show tables returns TableName, DatabaseName, Folder, DocString
            name = row.get("TableName")
            if not name:
                raise KustoToolError(
                    ErrorKind.EXECUTION,
                    f"Unexpected '{LIST_TABLES_COMMAND}' result row: missing TableName",
                )
            tables.append(
                TableSummary(
                    name=Table(name),
                    database=Database(row.get("DatabaseName") or database),
                    folder=row.get("Folder") or None,
                    doc_string=row.get("DocString") or None,
                )
            )

        return sorted(tables, key=lambda table: table.name)
