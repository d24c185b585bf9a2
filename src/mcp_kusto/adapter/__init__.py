"""
Adapter layer for infra implementation.

This layer provides EffectHandler classes that correspond 1:1 with handler Effect protocols.
"""

from .execute_query_handler import ExecuteQueryEffectHandler
from .get_table_schema_handler import GetTableSchemaEffectHandler
from .list_tables_handler import ListTablesEffectHandler

__all__ = [
    "ExecuteQueryEffectHandler",
    "GetTableSchemaEffectHandler",
    "ListTablesEffectHandler",
]
