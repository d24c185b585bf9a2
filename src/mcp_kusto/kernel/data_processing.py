"""
Conversion of raw Kusto result rows into JSON-compatible records.
"""

from collections.abc import Mapping, Sequence
from typing import Any

import attrs

from ..json_converter import Jsonable, KustoJsonConverter


@attrs.define(frozen=True)
class RowProcessingResult:
    """Result of processing a single raw row.

    Attributes
    ----------
    processed_row : dict[str, Jsonable]
        The row data converted to JSON-compatible types
    warnings : list[str]
        Warning messages for columns holding unsupported data types
    """

    processed_row: dict[str, Jsonable]
    warnings: list[str]

    @classmethod
    def from_raw_row(
        cls,
        converter: KustoJsonConverter,
        raw_row: Mapping[str, Any],
    ) -> "RowProcessingResult":
        processed_row: dict[str, Jsonable] = {}
        warnings: list[str] = []

        for column, value in raw_row.items():
            try:
                processed_value = converter.unstructure(value)
            except ValueError:
                processed_row[column] = f"<unsupported_type: {type(value).__name__}>"
                warnings.append(f"Column '{column}' contains unsupported data type")
            else:
                processed_row[column] = processed_value

        return cls(processed_row=processed_row, warnings=warnings)


@attrs.define(frozen=True)
class DataProcessingResult:
    """Result of processing multiple raw rows.

    Warnings are deduplicated across all processed rows, keeping the order
    in which they were first seen.
    """

    processed_rows: list[dict[str, Jsonable]]
    warnings: list[str]

    @property
    def row_count(self) -> int:
        return len(self.processed_rows)

    @classmethod
    def from_raw_rows(
        cls,
        converter: KustoJsonConverter,
        raw_rows: Sequence[Mapping[str, Any]],
    ) -> "DataProcessingResult":
        if not raw_rows:
            return cls(processed_rows=[], warnings=[])

        processed_rows: list[dict[str, Jsonable]] = []
        warnings: dict[str, None] = {}

        for row in raw_rows:
            result = RowProcessingResult.from_raw_row(converter, row)
            processed_rows.append(result.processed_row)
            warnings.update(dict.fromkeys(result.warnings))

        return cls(processed_rows=processed_rows, warnings=list(warnings))
