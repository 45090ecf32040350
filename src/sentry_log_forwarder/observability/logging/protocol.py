"""Observability – LogEvent and the ports the forwarder talks to."""
from __future__ import annotations

import dataclasses
import logging
import threading
import traceback
from datetime import UTC, datetime
from typing import Any, Mapping, Protocol, Sequence

from sentry_log_forwarder.kernel.levels import Level
from sentry_log_forwarder.observability.logging.context import current_named_tags, current_tags

# Attributes every LogRecord carries; anything else on a record came from ``extra=``.
_RECORD_ATTRS: frozenset[str] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}

# ``extra=`` keys that map onto LogEvent fields instead of the payload.
_EVENT_EXTRAS: frozenset[str] = frozenset(
    {"duration", "metric", "metric_amount", "tags", "named_tags", "payload"}
)


@dataclasses.dataclass(frozen=True)
class ExceptionInfo:
    """Class name, message and backtrace frames of a logged exception."""

    class_name: str
    message: str
    backtrace: Sequence[str] = ()

    @classmethod
    def from_exception(cls, exc: BaseException) -> "ExceptionInfo":
        frames = traceback.format_tb(exc.__traceback__)
        return cls(
            class_name=type(exc).__name__,
            message=str(exc),
            backtrace=tuple(frame.rstrip("\n") for frame in frames),
        )


@dataclasses.dataclass(frozen=True)
class LogEvent:
    """One log event as delivered by the host logging framework.

    ``exception`` may be an :class:`ExceptionInfo` or a live exception;
    ``backtrace`` is only reported when no exception is attached.
    """

    name: str
    level: Level | str
    message: str
    thread_name: str = dataclasses.field(default_factory=lambda: threading.current_thread().name)
    time: datetime = dataclasses.field(default_factory=lambda: datetime.now(UTC))
    duration: float | None = None
    metric: str | None = None
    metric_amount: float | None = None
    exception: ExceptionInfo | BaseException | None = None
    backtrace: Sequence[str] | None = None
    tags: Sequence[str] = ()
    named_tags: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    payload: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    file_name: str | None = None
    line: int | None = None

    @classmethod
    def from_record(cls, record: logging.LogRecord) -> "LogEvent":
        """Build an event from a stdlib :class:`logging.LogRecord`.

        ``duration``, ``metric``, ``metric_amount``, ``tags``, ``named_tags``
        and ``payload`` are read from ``extra=``; any other extra key joins the
        payload.  Tags set with :func:`tagged` are applied first.
        """
        extras = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and key not in _EVENT_EXTRAS
        }
        exception: ExceptionInfo | None = None
        if record.exc_info and record.exc_info[1] is not None:
            exception = ExceptionInfo.from_exception(record.exc_info[1])

        return cls(
            name=record.name,
            level=Level.from_stdlib(record.levelno),
            message=record.getMessage(),
            thread_name=record.threadName or "",
            time=datetime.fromtimestamp(record.created, UTC),
            duration=getattr(record, "duration", None),
            metric=getattr(record, "metric", None),
            metric_amount=getattr(record, "metric_amount", None),
            exception=exception,
            backtrace=record.stack_info.splitlines() if record.stack_info else None,
            tags=(*current_tags(), *(getattr(record, "tags", None) or ())),
            named_tags={**current_named_tags(), **(getattr(record, "named_tags", None) or {})},
            payload={**extras, **(getattr(record, "payload", None) or {})},
            file_name=record.pathname or None,
            line=record.lineno,
        )


class StructuredLogSink(Protocol):
    """Leveled structured-log sink (``sentry_sdk.logger`` shaped).

    Only ``info`` is guaranteed; other levels are probed with ``getattr``.
    """

    def info(self, message: str, /, **attributes: Any) -> Any: ...


class LogBackend(Protocol):
    """Port: the monitoring backend client."""

    @property
    def logger(self) -> StructuredLogSink | None: ...

    def is_available(self) -> bool: ...

    def is_initialized(self) -> bool: ...


__all__ = ["ExceptionInfo", "LogBackend", "LogEvent", "StructuredLogSink"]
