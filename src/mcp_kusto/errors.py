"""Error taxonomy shared by the handler and router layers."""

from enum import StrEnum

from azure.core.exceptions import ClientAuthenticationError


class ErrorKind(StrEnum):
    NOT_INITIALIZED = "not_initialized"
    INVALID_PARAMETER = "invalid_parameter"
    AUTHENTICATION = "authentication"
    EXECUTION = "execution"
    UNKNOWN_TOOL = "unknown_tool"


class KustoToolError(Exception):
    """An operation failure tagged with its :class:`ErrorKind`.

    The kind stays available to callers and tests; it is flattened to the
    message text only when a response envelope is built.
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind

    @property
    def message(self) -> str:
        return str(self)

    @classmethod
    def from_exception(cls, err: Exception) -> "KustoToolError":
        """Classify an arbitrary exception raised below the handler.

        Parameters
        ----------
        err : Exception
            The caught exception.

        Returns
        -------
        KustoToolError
            ``err`` itself when already tagged, an ``AUTHENTICATION`` error
            for Azure credential failures, ``EXECUTION`` otherwise.
        """
        match err:
            case KustoToolError():
                return err
            case ClientAuthenticationError():
                return cls(ErrorKind.AUTHENTICATION, str(err))
            case _:
                return cls(ErrorKind.EXECUTION, str(err))
