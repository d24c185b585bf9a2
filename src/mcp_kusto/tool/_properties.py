from typing import Any

# Input schema properties shared by every tool
TARGET_PROPERTIES: dict[str, Any] = {
    "database": {
        "type": "string",
        "description": "Database to run against (defaults to KUSTO_DEFAULT_DATABASE)",
    },
    "clusterUrl": {
        "type": "string",
        "description": "Cluster URL or short cluster name, e.g. https://help.kusto.windows.net or help (defaults to KUSTO_DEFAULT_CLUSTER)",
    },
}
