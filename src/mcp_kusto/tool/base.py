from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

import mcp.types as types
from mcp.shared.exceptions import McpError
from pydantic import ValidationError

from ..handler import TargetArgs


class Tool[A: TargetArgs](ABC):
    @property
    @abstractmethod
    def name(self) -> str: ...

    @property
    @abstractmethod
    def args_model(self) -> type[A]: ...

    @property
    @abstractmethod
    def definition(self) -> types.Tool: ...

    @abstractmethod
    async def perform(self, args: A) -> types.CallToolResult: ...

    def parse_arguments(self, arguments: Mapping[str, Any] | None) -> A:
        """Validate raw tool arguments into the typed argument model.

        Raises
        ------
        McpError
            ``INVALID_PARAMS`` when the arguments do not validate.
        """
        try:
            return self.args_model.model_validate(arguments or {})
        except ValidationError as e:
            raise McpError(
                types.ErrorData(
                    code=types.INVALID_PARAMS,
                    message=f"Invalid arguments for {self.name}: {e}",
                )
            ) from e
