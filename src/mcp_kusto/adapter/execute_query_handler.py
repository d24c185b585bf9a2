"""ExecuteQuery EffectHandler implementation."""

from typing import Any

from ..kernel import ClusterUrl, Database
from ..kusto_client import KustoClient


class ExecuteQueryEffectHandler:
    """EffectHandler for ExecuteQuery operations."""

    def __init__(self, client: KustoClient) -> None:
        self.client = client

    async def execute_query(
        self,
        cluster: ClusterUrl,
        database: Database,
        query: str,
    ) -> list[dict[str, Any]]:
        return await self.client.execute(cluster, database, query)
