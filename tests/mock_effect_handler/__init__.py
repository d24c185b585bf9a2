from .execute_query import MockExecuteQuery
from .get_table_schema import MockGetTableSchema
from .list_tables import MockListTables

__all__ = [
    "MockExecuteQuery",
    "MockGetTableSchema",
    "MockListTables",
]
