"""Observability – forwarding log events to Sentry structured logs."""
from sentry_log_forwarder.observability.logging.context import current_named_tags, current_tags, tagged
from sentry_log_forwarder.observability.logging.filters import SensitiveFieldsFilter, build_event_filter
from sentry_log_forwarder.observability.logging.formatters import (
    Formatter,
    RawFormatter,
    RedactingFormatter,
    resolve_formatter,
)
from sentry_log_forwarder.observability.logging.protocol import (
    ExceptionInfo,
    LogBackend,
    LogEvent,
    StructuredLogSink,
)
from sentry_log_forwarder.observability.logging.forwarder import LogForwarder
from sentry_log_forwarder.observability.logging.handler import SentryLogHandler
from sentry_log_forwarder.observability.logging.processors import SentryLogsProcessor, get_logger
from sentry_log_forwarder.observability.logging.factory import JsonLoggerFactory

__all__ = [
    "ExceptionInfo",
    "Formatter",
    "JsonLoggerFactory",
    "LogBackend",
    "LogEvent",
    "LogForwarder",
    "RawFormatter",
    "RedactingFormatter",
    "SensitiveFieldsFilter",
    "SentryLogHandler",
    "SentryLogsProcessor",
    "StructuredLogSink",
    "build_event_filter",
    "current_named_tags",
    "current_tags",
    "get_logger",
    "resolve_formatter",
    "tagged",
]
