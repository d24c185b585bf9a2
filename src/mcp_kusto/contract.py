import inspect
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any, NoReturn

# Parameter names whose values never end up in a violation's context
SENSITIVE_NAMES = frozenset(
    {
        "credential",
        "password",
        "secret",
        "token",
        "key",
        "api_key",
        "auth",
    }
)


class ContractViolationError(Exception):
    """Exception raised when an async call fails with an unexpected exception.

    Attributes
    ----------
    function_name : str | None
        Name of the function where the contract violation occurred.
    original_exception : Exception | None
        The original exception that triggered the contract violation.
    context : dict[str, Any]
        Sanitized call arguments.
    """

    def __init__(
        self,
        message: str = "contract violation",
        *,
        function_name: str | None = None,
        original_exception: Exception | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.function_name = function_name
        self.original_exception = original_exception
        self.context = context or {}

    def __str__(self) -> str:
        parts = [super().__str__()]

        if self.function_name:
            parts.append(f"in function '{self.function_name}'")

        if self.original_exception:
            parts.append(
                f"caused by {type(self.original_exception).__name__}: {self.original_exception}"
            )

        return " ".join(parts)


def _sanitize_arguments(
    fn: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> dict[str, Any]:
    try:
        param_names = list(inspect.signature(fn).parameters)
    except (ValueError, TypeError):
        param_names = []

    sanitized_args = tuple(
        "<REDACTED>"
        if i < len(param_names) and param_names[i].lower() in SENSITIVE_NAMES
        else arg
        for i, arg in enumerate(args)
    )
    sanitized_kwargs = {
        key: "<REDACTED>" if key.lower() in SENSITIVE_NAMES else value
        for key, value in kwargs.items()
    }
    return {"args": sanitized_args, "kwargs": sanitized_kwargs}


def _default_map_err(
    err: Exception,
    fn: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
) -> NoReturn:
    raise ContractViolationError(
        "contract violation",
        function_name=fn.__name__,
        original_exception=err,
        context=_sanitize_arguments(fn, args, kwargs),
    ) from err


def contract_async[R, **P](
    map_err: Callable[
        [Exception, Callable[..., Awaitable[Any]], tuple[Any, ...], dict[str, Any]],
        NoReturn,
    ] = _default_map_err,
    known_err: tuple[type[Exception], ...] = (),
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Enforce an error handling contract on an async function.

    Exceptions listed in ``known_err`` pass through unchanged; any other
    exception is handed to ``map_err``, which by default raises
    :class:`ContractViolationError`.

    Examples
    --------
    >>> import asyncio
    >>> @contract_async(known_err=(ValueError,))
    ... async def parse_int(s: str) -> int:
    ...     return int(s) // 0 if s.isdigit() else int(s)
    >>> async def run(s: str) -> str:
    ...     try:
    ...         await parse_int(s)
    ...     except ValueError:
    ...         return "known"
    ...     except ContractViolationError:
    ...         return "violation"
    ...     return "ok"
    >>> asyncio.run(run("abc"))
    'known'
    >>> asyncio.run(run("1"))
    'violation'
    """

    def decorator(fn: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @wraps(fn)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            try:
                return await fn(*args, **kwargs)
            except known_err:
                raise
            except Exception as e:
                map_err(e, fn, args, kwargs)

        return wrapper

    return decorator
