"""
Kusto client for MCP server.
"""

import asyncio
import logging
import threading
import uuid
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from typing import Any, Protocol

from azure.core.credentials import TokenCredential
from azure.core.exceptions import ClientAuthenticationError
from azure.identity import AzureCliCredential
from azure.kusto.data import (
    ClientRequestProperties,
    KustoConnectionStringBuilder,
)
from azure.kusto.data import KustoClient as AzureKustoClient
from azure.kusto.data.exceptions import KustoError

from .contract import contract_async
from .errors import ErrorKind, KustoToolError
from .kernel import ClusterUrl, Database, token_scope
from .settings import KustoSettings

logger = logging.getLogger(__name__)


class QueryClient(Protocol):
    """The subset of ``azure.kusto.data.KustoClient`` used here."""

    def execute(
        self,
        database: str | None,
        query: str,
        properties: ClientRequestProperties | None = None,
    ) -> Any: ...

    def close(self) -> None: ...


def connect(
    cluster: ClusterUrl,
    credential_factory: Callable[[], TokenCredential],
) -> QueryClient:
    """Acquire a credential for ``cluster`` and build an SDK client bound to it.

    A token is requested up front so that authentication problems surface
    here rather than on the first query.

    Raises
    ------
    ClientAuthenticationError
        If no token can be obtained (e.g. the Azure CLI is not logged in).
    """
    logger.info(f"Initializing new Kusto client for cluster: {cluster}")
    credential = credential_factory()
    _ = credential.get_token(token_scope(cluster))
    kcsb = KustoConnectionStringBuilder.with_azure_token_credential(cluster, credential)
    return AzureKustoClient(kcsb)


class ConnectionCache:
    """Holds the client of the most recently used cluster.

    A client is created on first use, reused while the cluster identity is
    unchanged and replaced when it changes. The stale client is discarded
    without being closed, so a query already holding it can finish. The
    lookup-or-create sequence runs under a lock because queries execute on
    worker threads.

    Parameters
    ----------
    connector : Callable[[ClusterUrl], QueryClient]
        Builds a client (including credential acquisition) for a cluster.
    """

    def __init__(self, connector: Callable[[ClusterUrl], QueryClient]) -> None:
        self._connector = connector
        self._lock = threading.Lock()
        self._cluster: ClusterUrl | None = None
        self._client: QueryClient | None = None

    @property
    def current_cluster(self) -> ClusterUrl | None:
        return self._cluster

    def get(self, cluster: ClusterUrl) -> QueryClient:
        with self._lock:
            if self._client is None or self._cluster != cluster:
                # The stale client may still serve a query on another worker
                self._client = self._connector(cluster)
                self._cluster = cluster
            return self._client

    def close(self) -> None:
        """Close the current client. Only called at shutdown."""
        with self._lock:
            if self._client is not None:
                self._client.close()
            self._client = None
            self._cluster = None


def _primary_rows(response: Any) -> list[dict[str, Any]]:
    """Extract the primary result rows from an SDK response.

    Raises
    ------
    KustoToolError
        If the response has no primary result or its payload is malformed.
    """
    primary_results = getattr(response, "primary_results", None)
    if not primary_results:
        raise KustoToolError(ErrorKind.EXECUTION, "Query returned no primary result")

    payload = primary_results[0].to_dict()
    rows = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(rows, list):
        raise KustoToolError(ErrorKind.EXECUTION, "Malformed primary result payload")
    return rows


class KustoClient:
    """Kusto (Azure Data Explorer) client.

    Parameters
    ----------
    thread_pool_executor : ThreadPoolExecutor
        Executor the blocking SDK calls run on.
    settings : KustoSettings
        Request settings.
    credential_factory : Callable[[], TokenCredential]
        Returns a fresh credential for each new connection.
    """

    def __init__(
        self,
        thread_pool_executor: ThreadPoolExecutor,
        settings: KustoSettings,
        credential_factory: Callable[[], TokenCredential] = AzureCliCredential,
    ) -> None:
        self.thread_pool_executor = thread_pool_executor
        self.settings = settings
        self.connections = ConnectionCache(
            lambda cluster: connect(cluster, credential_factory),
        )

    def _request_properties(self) -> ClientRequestProperties:
        properties = ClientRequestProperties()
        properties.client_request_id = f"mcp-kusto;{uuid.uuid4()}"
        properties.set_option(
            ClientRequestProperties.request_timeout_option_name,
            timedelta(seconds=self.settings.request_timeout_seconds),
        )
        return properties

    def _execute_sync(
        self,
        cluster: ClusterUrl,
        database: Database,
        query: str,
    ) -> list[dict[str, Any]]:
        client = self.connections.get(cluster)
        try:
            response = client.execute(database, query, self._request_properties())
        except Exception:
            logger.exception("Query execution error")
            raise
        return _primary_rows(response)

    @contract_async(
        known_err=(
            KustoToolError,
            KustoError,
            ClientAuthenticationError,
            TimeoutError,
        )
    )
    async def execute(
        self,
        cluster: ClusterUrl,
        database: Database,
        query: str,
    ) -> list[dict[str, Any]]:
        """Execute a KQL query or management command and return its rows.

        Parameters
        ----------
        cluster : ClusterUrl
            Normalized cluster URL
        database : Database
            Database the query runs against
        query : str
            KQL query, or a management command starting with ``.``

        Returns
        -------
        list[dict[str, Any]]
            Primary result rows keyed by column name

        Raises
        ------
        ClientAuthenticationError
            If a credential cannot be acquired for a new connection
        KustoError
            Service or client side query failures
        KustoToolError
            If the response payload is malformed
        TimeoutError
            If the request times out
        """
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            self.thread_pool_executor,
            self._execute_sync,
            cluster,
            database,
            query,
        )

    def close(self) -> None:
        self.connections.close()
