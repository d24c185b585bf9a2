"""
JSON conversion utilities using cattrs for Kusto result values.
"""

from datetime import timedelta
from decimal import Decimal
from typing import Any, TypeGuard
from uuid import UUID

from cattrs.preconf.json import JsonConverter, make_converter

Jsonable = None | bool | int | float | str | list["Jsonable"] | dict[str, "Jsonable"]


class KustoJsonConverter:
    """
    A cattrs JSON converter that only ever produces JSON-compatible values.

    Kusto rows carry ``datetime`` (handled by cattrs' JSON preset),
    ``timedelta`` for timespan columns, ``Decimal`` for decimal columns and
    ``UUID`` for guid columns; each gets a hook here.

    Examples
    --------
    >>> converter = KustoJsonConverter()
    >>> converter.unstructure({"key": [1, 2, 3]})
    {'key': [1, 2, 3]}
    >>> from datetime import timedelta
    >>> converter.unstructure(timedelta(hours=1, seconds=30))
    '1:00:30'
    """

    def __init__(self) -> None:
        converter = make_converter()

        converter.register_unstructure_hook(Decimal, _convert_decimal_to_float)
        converter.register_unstructure_hook(UUID, str)
        converter.register_unstructure_hook(timedelta, str)

        self._converter: JsonConverter = converter

    def unstructure(self, value: Any) -> Jsonable:
        """
        Convert a value to its JSON representation.

        Raises
        ------
        ValueError
            If the unstructured value is not JSON-compatible
        """
        unstructured = self._converter.unstructure(value)
        if is_json_compatible_type(unstructured):
            return unstructured
        raise ValueError(f"unstructured value is not JSON-compatible: {type(value).__name__}")


def _convert_decimal_to_float(dec: Decimal) -> float:
    """
    Convert Decimal to float for JSON compatibility.

    >>> _convert_decimal_to_float(Decimal("123.45"))
    123.45
    """
    return float(dec)


def is_json_compatible_type(value: Any) -> TypeGuard[Jsonable]:
    """
    Check if a value is a JSON-compatible type.

    JSON supports: null, bool, int, float, str, list, dict (with string keys)

    Examples
    --------
    >>> is_json_compatible_type({"key": [1, None, "x"]})
    True
    >>> is_json_compatible_type({1: "invalid_key"})
    False
    """
    if value is None:
        return True
    if isinstance(value, bool | int | float | str):
        return True
    if isinstance(value, list):
        return all(is_json_compatible_type(item) for item in value)
    if isinstance(value, dict):
        return all(isinstance(key, str) for key in value) and all(
            is_json_compatible_type(val) for val in value.values()
        )
    return False
