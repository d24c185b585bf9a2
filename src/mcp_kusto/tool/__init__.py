from .base import Tool
from .execute_kusto_query import ExecuteKustoQueryTool
from .get_table_schema import GetTableSchemaTool
from .list_tables import ListTablesTool

__all__ = [
    "ExecuteKustoQueryTool",
    "GetTableSchemaTool",
    "ListTablesTool",
    "Tool",
]
