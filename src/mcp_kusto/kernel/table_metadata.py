"""Table metadata domain models using attrs."""

from typing import NewType

import attrs

Database = NewType("Database", str)
Table = NewType("Table", str)


@attrs.define(frozen=True, slots=True)
class TableSummary:
    """One entry of a database's table list."""

    name: Table
    database: Database
    folder: str | None = None
    doc_string: str | None = None


@attrs.define(frozen=True, slots=True)
class TableColumn:
    """Domain model for a table column."""

    name: str
    ordinal: int
    data_type: str
    column_type: str


@attrs.define(frozen=True, slots=True)
class TableSchema:
    """Domain model for a table's column schema."""

    database: Database
    name: Table
    columns: list[TableColumn]

    @property
    def column_count(self) -> int:
        return len(self.columns)
