"""
Invocation events for the MCP server.

Events are emitted through an explicitly constructed :class:`EventLog` that
the server opens at startup and closes at shutdown.
"""

import json
import logging
import time
from datetime import UTC, datetime
from pathlib import Path
from types import TracebackType
from typing import Any, Self

logger = logging.getLogger(__name__)

EVENTS_LOGGER_NAME = "mcp_kusto.events"


class StopWatch:
    """A simple stopwatch class to measure execution time."""

    def __init__(self, start_time: int) -> None:
        self._start_time = start_time

    @classmethod
    def start(cls) -> Self:
        return cls(time.perf_counter_ns())

    def elapsed_ns(self) -> int:
        return time.perf_counter_ns() - self._start_time

    def elapsed_ms(self) -> float:
        """Get the elapsed time in milliseconds."""
        return self.elapsed_ns() / 1_000_000


class _JsonLineFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "event": record.getMessage(),
            **getattr(record, "dimensions", {}),
        }
        return json.dumps(payload, default=str)


class EventLog:
    """Structured event sink with an explicit ``open``/``close`` lifecycle.

    Events are always logged on the ``mcp_kusto.events`` logger. When a file
    is given, :meth:`open` additionally attaches a JSON-lines file handler
    that :meth:`close` flushes and removes.

    Parameters
    ----------
    file : Path | None
        Optional JSON-lines file the events are appended to.
    dimensions : dict[str, Any] | None
        Dimensions attached to every event (server name, version, ...).
    """

    def __init__(
        self,
        file: Path | None = None,
        dimensions: dict[str, Any] | None = None,
    ) -> None:
        self._file = file
        self._dimensions = dimensions or {}
        self._logger = logging.getLogger(EVENTS_LOGGER_NAME)
        self._logger.setLevel(logging.INFO)
        self._handler: logging.Handler | None = None
        self._opened = False

    @property
    def is_open(self) -> bool:
        return self._opened

    def open(self) -> None:
        if self._opened:
            return

        if self._file is not None:
            self._file.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(self._file, encoding="utf-8")
            handler.setFormatter(_JsonLineFormatter())
            self._logger.addHandler(handler)
            self._handler = handler
            logger.info(f"Writing events to {self._file}")

        self._opened = True

    def close(self) -> None:
        if not self._opened:
            return

        if self._handler is not None:
            self._handler.flush()
            self._logger.removeHandler(self._handler)
            self._handler.close()
            self._handler = None

        self._opened = False

    def event(self, name: str, **dimensions: Any) -> None:
        """Emit one event.

        Events emitted while the log is closed are dropped with a warning.
        """
        if not self._opened:
            logger.warning(f"Event '{name}' emitted on a closed event log")
            return

        self._logger.info(
            name,
            extra={"dimensions": {**self._dimensions, **dimensions}},
        )

    def __enter__(self) -> Self:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
