from typing import Any

from mcp_kusto.kernel import ClusterUrl, Database


class MockExecuteQuery:
    """Mock implementation of EffectExecuteQuery protocol."""

    def __init__(
        self,
        result_data: list[dict[str, Any]] | None = None,
        should_raise: Exception | None = None,
    ) -> None:
        self.result_data = result_data
        self.should_raise = should_raise
        self.call_count = 0
        self.called_with_cluster: ClusterUrl | None = None
        self.called_with_database: Database | None = None
        self.called_with_query: str | None = None

    async def execute_query(
        self,
        cluster: ClusterUrl,
        database: Database,
        query: str,
    ) -> list[dict[str, Any]]:
        self.call_count += 1
        self.called_with_cluster = cluster
        self.called_with_database = database
        self.called_with_query = query
        if self.should_raise:
            raise self.should_raise
        if self.result_data is None:
            # Return minimal default data
            return [
                {"State": "TEXAS", "EventCount": 4701},
                {"State": "KANSAS", "EventCount": 3166},
            ]
        return self.result_data
