"""Observability – formatters turning a LogEvent into a mutable context dict.

The forwarder consumes the returned dict destructively: ``message``,
``level``, ``payload``, ``named_tags`` and ``tags`` are read as overrides
and whatever is left is merged into the Sentry attributes.  Formatters
must therefore return fresh containers, never the event's own.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from sentry_log_forwarder.kernel.errors import UnknownFormatterError
from sentry_log_forwarder.observability.logging.filters import SensitiveFieldsFilter

if TYPE_CHECKING:
    from sentry_log_forwarder.observability.logging.protocol import LogEvent

Formatter = Callable[["LogEvent"], dict[str, Any]]


class RawFormatter:
    """Pass the event's own fields through unchanged."""

    def __call__(self, event: "LogEvent") -> dict[str, Any]:
        context: dict[str, Any] = {
            "message": event.message,
            "level": event.level,
            "payload": dict(event.payload),
            "named_tags": dict(event.named_tags),
            "tags": list(event.tags),
        }
        if event.file_name:
            context["file"] = event.file_name
        if event.line is not None:
            context["line"] = event.line
        return context


class RedactingFormatter(RawFormatter):
    """Raw output with sensitive payload and named-tag values redacted."""

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._filter = SensitiveFieldsFilter(sensitive_fields)

    def __call__(self, event: "LogEvent") -> dict[str, Any]:
        context = super().__call__(event)
        context["payload"] = self._filter.redact_deep(context["payload"])
        context["named_tags"] = self._filter.redact_deep(context["named_tags"])
        return context


FORMATTERS: dict[str, Callable[[], Formatter]] = {
    "raw": RawFormatter,
    "redacted": RedactingFormatter,
}


def resolve_formatter(option: Any = None) -> Formatter:
    """Resolve the ``formatter`` option.

    Accepts ``None`` (raw), a registered name, an object exposing
    ``format(event)`` or any callable taking the event.
    """
    if option is None:
        return RawFormatter()
    if isinstance(option, str):
        factory = FORMATTERS.get(option.lower())
        if factory is None:
            raise UnknownFormatterError(option)
        return factory()
    format_method = getattr(option, "format", None)
    if callable(format_method) and not callable(option):
        return format_method
    if callable(option):
        return option
    raise UnknownFormatterError(option)


__all__ = ["FORMATTERS", "Formatter", "RawFormatter", "RedactingFormatter", "resolve_formatter"]
