"""Observability – structlog processor and get_logger helper.

SentryLogsProcessor — forwards every structlog event to Sentry logs.
get_logger(name) — returns a bound structlog logger.
"""
from __future__ import annotations

import sys
from datetime import UTC, datetime
from typing import Any

import structlog

from sentry_log_forwarder.kernel.levels import Level
from sentry_log_forwarder.observability.logging.context import current_named_tags, current_tags
from sentry_log_forwarder.observability.logging.forwarder import LogForwarder
from sentry_log_forwarder.observability.logging.protocol import ExceptionInfo, LogEvent

# Keys structlog (or the caller) uses for things LogEvent models directly.
_RESERVED_KEYS: frozenset[str] = frozenset({
    "event", "level", "logger", "timestamp", "exc_info", "exception",
    "duration", "metric", "metric_amount", "tags", "named_tags", "payload",
})

_METHOD_LEVELS: dict[str, Level] = {
    "exception": Level.ERROR,
    "msg": Level.INFO,
    "log": Level.INFO,
}


def _exception_from(event_dict: dict[str, Any]) -> ExceptionInfo | None:
    exc_info = event_dict.get("exc_info")
    if exc_info is True:
        exc_info = sys.exc_info()
    if isinstance(exc_info, BaseException):
        return ExceptionInfo.from_exception(exc_info)
    if isinstance(exc_info, tuple) and len(exc_info) == 3 and exc_info[1] is not None:
        return ExceptionInfo.from_exception(exc_info[1])
    return None


class SentryLogsProcessor:
    """structlog processor that forwards each event through a :class:`LogForwarder`.

    The event dict is returned untouched so later processors still render
    it.  ``event`` is the message; ``exc_info`` becomes the exception (an
    ``exception`` string already rendered by ``format_exc_info`` becomes the
    backtrace); ``tags``, ``named_tags``, ``payload``, ``duration``,
    ``metric`` and ``metric_amount`` are honoured; every other key joins the
    payload.

    Usage::

        import structlog
        from sentry_log_forwarder.observability.logging import SentryLogsProcessor

        structlog.configure(processors=[
            structlog.stdlib.add_log_level,
            SentryLogsProcessor(application="billing"),
            structlog.processors.JSONRenderer(),
        ])
    """

    def __init__(self, forwarder: LogForwarder | None = None, **options: Any) -> None:
        self.forwarder = forwarder if forwarder is not None else LogForwarder(**options)

    def __call__(
        self,
        logger: Any,
        method_name: str,
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        event = self.to_event(logger, method_name, event_dict)
        if self.forwarder.should_forward(event):
            self.forwarder.handle(event)
        return event_dict

    @staticmethod
    def to_event(logger: Any, method_name: str, event_dict: dict[str, Any]) -> LogEvent:
        """Build a :class:`LogEvent` from a structlog event dict."""
        level = (
            Level.lookup(event_dict.get("level"))
            or _METHOD_LEVELS.get(method_name)
            or Level.lookup(method_name)
            or Level.INFO
        )
        name = event_dict.get("logger") or getattr(logger, "name", None) or "structlog"
        timestamp = event_dict.get("timestamp")
        rendered = event_dict.get("exception")
        payload = {k: v for k, v in event_dict.items() if k not in _RESERVED_KEYS}
        payload.update(event_dict.get("payload") or {})

        return LogEvent(
            name=str(name),
            level=level,
            message=str(event_dict.get("event", "")),
            time=timestamp if isinstance(timestamp, datetime) else datetime.now(UTC),
            duration=event_dict.get("duration"),
            metric=event_dict.get("metric"),
            metric_amount=event_dict.get("metric_amount"),
            exception=_exception_from(event_dict),
            backtrace=rendered.splitlines() if isinstance(rendered, str) else None,
            tags=(*current_tags(), *(event_dict.get("tags") or ())),
            named_tags={**current_named_tags(), **(event_dict.get("named_tags") or {})},
            payload=payload,
        )


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["SentryLogsProcessor", "get_logger"]
