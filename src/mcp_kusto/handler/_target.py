import attrs
from pydantic import BaseModel, ConfigDict, Field

from ..errors import ErrorKind, KustoToolError
from ..kernel import ClusterUrl, Database, normalize_cluster_url
from ..settings import KustoSettings
from ._envelope import QueryInput

CLUSTER_REQUIRED_MESSAGE = (
    "Cluster URL must be provided either in parameters "
    "or via KUSTO_DEFAULT_CLUSTER environment variable"
)
DATABASE_REQUIRED_MESSAGE = (
    "Database must be provided either in parameters "
    "or via KUSTO_DEFAULT_DATABASE environment variable"
)


class TargetArgs(BaseModel):
    """Arguments shared by every tool: where the operation runs."""

    model_config = ConfigDict(populate_by_name=True)

    cluster_url: str | None = Field(None, alias="clusterUrl")
    database: str | None = None


@attrs.define(frozen=True, slots=True)
class QueryTarget:
    cluster: ClusterUrl
    database: Database


def _pick(value: str | None, default: str | None) -> str | None:
    for candidate in (value, default):
        if candidate is not None and candidate.strip():
            return candidate.strip()
    return None


def resolve_target(args: TargetArgs, defaults: KustoSettings) -> QueryTarget:
    """Resolve cluster and database from the arguments or the defaults.

    Empty strings count as absent, so an empty argument falls back to the
    default.

    Raises
    ------
    KustoToolError
        ``INVALID_PARAMETER`` when the cluster or the database resolves
        from neither source.
    """
    cluster = _pick(args.cluster_url, defaults.default_cluster)
    if cluster is None:
        raise KustoToolError(ErrorKind.INVALID_PARAMETER, CLUSTER_REQUIRED_MESSAGE)

    database = _pick(args.database, defaults.default_database)
    if database is None:
        raise KustoToolError(ErrorKind.INVALID_PARAMETER, DATABASE_REQUIRED_MESSAGE)

    return QueryTarget(
        cluster=normalize_cluster_url(cluster),
        database=Database(database),
    )


def echo_input(args: TargetArgs, defaults: KustoSettings) -> QueryInput:
    """Build the ``input`` echo of a response, resolving what can be resolved."""
    cluster = _pick(args.cluster_url, defaults.default_cluster)
    return {
        "clusterUrl": normalize_cluster_url(cluster) if cluster is not None else None,
        "database": _pick(args.database, defaults.default_database),
    }
