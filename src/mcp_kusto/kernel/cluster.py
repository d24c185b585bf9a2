"""Cluster identity normalization."""

from typing import NewType

ClusterUrl = NewType("ClusterUrl", str)

KUSTO_DOMAIN_SUFFIX = "kusto.windows.net"


def normalize_cluster_url(cluster: str) -> ClusterUrl:
    """Normalize a cluster name or URL to a fully qualified cluster URL.

    Accepted forms are a full URL (``https://help.kusto.windows.net``),
    a host name (``help.kusto.windows.net``) and a short cluster name
    (``help``). The result is lower-cased so that inputs differing only
    in letter case share one identity. Trailing slashes, ports and paths
    are kept as given.

    Parameters
    ----------
    cluster : str
        Cluster name or URL.

    Returns
    -------
    ClusterUrl
        Normalized cluster URL.

    Raises
    ------
    ValueError
        If the input is empty or whitespace-only.

    Examples
    --------
    >>> normalize_cluster_url("help")
    'https://help.kusto.windows.net'
    >>> normalize_cluster_url("https://EXAMPLE.kusto.windows.net")
    'https://example.kusto.windows.net'
    >>> normalize_cluster_url("Example.Kusto.Windows.Net")
    'https://example.kusto.windows.net'
    >>> normalize_cluster_url("mycluster.westeurope")
    'https://mycluster.westeurope.kusto.windows.net'
    """
    trimmed = cluster.strip()
    if not trimmed:
        raise ValueError("Empty cluster identity")

    folded = trimmed.lower()
    if folded.startswith(("https://", "http://")):
        return ClusterUrl(folded)
    if folded.endswith(KUSTO_DOMAIN_SUFFIX):
        return ClusterUrl(f"https://{folded}")
    return ClusterUrl(f"https://{folded}.{KUSTO_DOMAIN_SUFFIX}")


def token_scope(cluster: ClusterUrl) -> str:
    """Return the AAD token scope for a cluster.

    >>> token_scope(ClusterUrl("https://help.kusto.windows.net"))
    'https://help.kusto.windows.net/.default'
    """
    return f"{cluster.rstrip('/')}/.default"
