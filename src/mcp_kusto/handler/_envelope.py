"""Uniform success/failure envelope returned by every operation."""

import json
from typing import NotRequired, TypedDict

import attrs
import mcp.types as types

from ..errors import ErrorKind, KustoToolError
from ..json_converter import Jsonable


class QueryInput(TypedDict):
    """Normalized echo of the operation input."""

    clusterUrl: str | None
    database: str | None
    query: NotRequired[str]
    table: NotRequired[str]


class Envelope(TypedDict):
    """JSON structure carried in the text content of a tool result."""

    success: bool
    input: QueryInput
    data: NotRequired[list[Jsonable]]
    message: NotRequired[str]
    warnings: NotRequired[list[str]]
    error: NotRequired[str]


@attrs.define(frozen=True)
class HandlerOutcome:
    """Result of a handler operation before it is flattened to an envelope.

    Exactly one of ``data`` and ``error`` is set. The error keeps its
    :class:`ErrorKind` so callers can branch on the failure category.
    """

    input: QueryInput
    data: list[Jsonable] | None = None
    message: str | None = None
    warnings: list[str] = attrs.field(factory=list)
    error: KustoToolError | None = None

    @classmethod
    def succeeded(
        cls,
        query_input: QueryInput,
        data: list[Jsonable],
        message: str,
        warnings: list[str] | None = None,
    ) -> "HandlerOutcome":
        return cls(input=query_input, data=data, message=message, warnings=warnings or [])

    @classmethod
    def failed(cls, query_input: QueryInput, error: KustoToolError) -> "HandlerOutcome":
        return cls(input=query_input, error=error)

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def error_kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None

    def to_envelope(self) -> Envelope:
        envelope: Envelope = {"success": self.success, "input": self.input}
        if self.error is not None:
            envelope["error"] = self.error.message
            return envelope

        envelope["data"] = self.data if self.data is not None else []
        if self.message is not None:
            envelope["message"] = self.message
        if self.warnings:
            envelope["warnings"] = self.warnings
        return envelope

    def to_result(self) -> types.CallToolResult:
        """Flatten into a single text content block; failures set ``isError``."""
        return types.CallToolResult(
            content=[
                types.TextContent(
                    type="text",
                    text=json.dumps(self.to_envelope(), indent=2, ensure_ascii=False),
                )
            ],
            isError=not self.success,
        )
