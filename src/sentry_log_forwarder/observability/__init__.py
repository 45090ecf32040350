"""Observability – log forwarding to Sentry."""

from sentry_log_forwarder.observability.logging import (
    LogEvent,
    LogForwarder,
    SentryLogHandler,
    SentryLogsProcessor,
    tagged,
)

__all__ = [
    "LogEvent",
    "LogForwarder",
    "SentryLogHandler",
    "SentryLogsProcessor",
    "tagged",
]
