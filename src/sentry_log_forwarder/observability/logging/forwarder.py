"""Observability – LogForwarder.

Translates one :class:`LogEvent` into a ``sentry_sdk.logger`` call::

    forwarder = LogForwarder(application="billing")
    forwarder.handle(LogEvent(name="billing.api", level="info", message="charged"))

The event is formatted into a mutable context dict which is then consumed
field by field: ``payload``, ``transaction_name``, the user keys, the
named tags and tags, ``level`` and ``message``.  Whatever is left of the
context and of the payload is merged into the attributes last.
"""
from __future__ import annotations

import socket
from typing import Any, Mapping

import structlog

from sentry_log_forwarder.adapters.sentry import SentrySdkBackend
from sentry_log_forwarder.config.settings import ForwarderSettings, load_forwarder_settings
from sentry_log_forwarder.kernel.levels import Level, level_token
from sentry_log_forwarder.observability.logging.filters import build_event_filter
from sentry_log_forwarder.observability.logging.formatters import resolve_formatter
from sentry_log_forwarder.observability.logging.protocol import (
    ExceptionInfo,
    LogBackend,
    LogEvent,
)

ORIGIN = "sentry_log_forwarder"
INTERNAL_LOGGER_NAME = "sentry_log_forwarder"

# Events from these loggers are never forwarded, or Sentry would log about itself.
SELF_LOGGER_NAMES: frozenset[str] = frozenset(
    {"Sentry", "sentry_sdk", "sentry_sdk.errors", INTERNAL_LOGGER_NAME}
)

MAX_TAG_KEY_LENGTH = 32
MAX_TAG_VALUE_LENGTH = 256

# source key -> key inside the ``user`` attribute
USER_KEYS: dict[str, str] = {
    "user_id": "id",
    "username": "username",
    "user_email": "email",
    "ip_address": "ip_address",
}

_log = structlog.get_logger(INTERNAL_LOGGER_NAME)


def extract_user(*sources: dict[str, Any]) -> dict[str, Any] | None:
    """Pop the user keys out of *sources* and build the ``user`` attribute.

    Sources are scanned in order, so later ones win.  A mapping stored under
    ``user`` in any source is merged on top.  Returns ``None`` when no
    source mentions a user at all.
    """
    user: dict[str, Any] = {}
    found = False
    for source in sources:
        for source_key, target_key in USER_KEYS.items():
            value = source.pop(source_key, None)
            if value is not None:
                user[target_key] = value
                found = True
    for source in sources:
        if isinstance(source.get("user"), Mapping):
            user.update(source.pop("user"))
            found = True
    return user if found else None


def extract_tags(context: dict[str, Any]) -> dict[str, str]:
    """Pop ``named_tags`` and ``tags`` from *context* into one string mapping.

    Plain tags are comma-joined under ``tag``, after any existing ``tag``
    named tag.  Keys and values are truncated to Sentry's tag limits.
    """
    named_tags = {str(k): str(v) for k, v in (context.pop("named_tags", None) or {}).items()}
    tags = context.pop("tags", None)
    if tags:
        joined = ", ".join(str(tag) for tag in tags)
        existing = named_tags.get("tag")
        named_tags["tag"] = f"{existing}, {joined}" if existing is not None else joined
    return {k[:MAX_TAG_KEY_LENGTH]: v[:MAX_TAG_VALUE_LENGTH] for k, v in named_tags.items()}


def resolve_sink_method(sink: Any, level: str) -> str:
    """Pick the sink method for *level*, degrading to ``warn`` then ``info``."""
    if _responds_to(sink, level):
        return level
    if level in ("warn", "warning") and _responds_to(sink, "warn"):
        return "warn"
    return "info"


def _responds_to(sink: Any, name: str) -> bool:
    return not name.startswith("_") and callable(getattr(sink, name, None))


class LogForwarder:
    """Forward log events to Sentry as structured logs.

    Parameters
    ----------
    level:
        Minimum severity accepted by :meth:`should_forward`.  Defaults to
        ``SENTRY_LEVEL`` or ``info``.
    formatter:
        ``None`` (raw), a formatter name, an object with ``format(event)`` or
        a callable ``(LogEvent) -> dict``.
    filter:
        Regex searched against the logger name, or a predicate over the event.
    host, application:
        Labels attached to every event.  Default to ``SENTRY_HOST`` /
        ``SENTRY_APPLICATION``; the host falls back to the machine name.
    backend:
        The monitoring backend.  Defaults to :class:`SentrySdkBackend`.
    settings:
        Ambient settings; loaded from the environment when omitted.  The
        ``environment`` label always comes from here.
    """

    def __init__(
        self,
        *,
        level: Level | str | int | None = None,
        formatter: Any = None,
        filter: Any = None,  # noqa: A002
        host: str | None = None,
        application: str | None = None,
        backend: LogBackend | None = None,
        settings: ForwarderSettings | None = None,
    ) -> None:
        self.settings = settings if settings is not None else load_forwarder_settings()
        self.level = Level.coerce(level if level is not None else self.settings.level)
        self.formatter = resolve_formatter(formatter)
        self._filter = build_event_filter(filter)
        self.host = host or self.settings.host or socket.gethostname()
        self.application = application or self.settings.application
        self.environment = self.settings.environment
        self.backend: LogBackend = backend if backend is not None else SentrySdkBackend()
        _log.debug(
            "log_forwarder_configured",
            level=self.level.value,
            host=self.host,
            application=self.application,
            environment=self.environment,
        )

    # ------------------------------------------------------------------
    # Host-facing API
    # ------------------------------------------------------------------

    def should_forward(self, event: LogEvent) -> bool:
        """Apply the minimum level and the filter, as host adapters do."""
        level = Level.lookup(event.level)
        if level is not None and not level.at_least(self.level):
            return False
        return bool(self._filter(event))

    def handle(self, event: LogEvent) -> bool:
        """Forward *event*; return ``False`` when it was suppressed."""
        if not self._forwardable(event):
            return False

        sink = self.backend.logger
        context = dict(self.formatter(event))
        attributes, message, level = self.build_attributes(event, context)
        method = resolve_sink_method(sink, level)
        getattr(sink, method)(message, **attributes)
        return True

    # ------------------------------------------------------------------
    # Translation
    # ------------------------------------------------------------------

    def build_attributes(
        self, event: LogEvent, context: dict[str, Any]
    ) -> tuple[dict[str, Any], Any, str]:
        """Consume *context* into ``(attributes, message, level)``."""
        payload = dict(context.pop("payload", None) or {})
        named_tags = dict(context.get("named_tags") or {})
        if "named_tags" in context:
            context["named_tags"] = named_tags
        transaction_name = named_tags.pop("transaction_name", None)
        user = extract_user(named_tags, payload)
        promoted = dict(named_tags)
        tags = extract_tags(context)
        level = context.pop("level", None)
        level = level_token(event.level if level is None else level)
        message = context.pop("message", None)
        if message is None:
            message = event.message

        attributes = self._base_attributes(event, transaction_name)
        if user:
            attributes["user"] = user
        if tags:
            attributes["tags"] = tags
        for key, value in promoted.items():
            attributes.setdefault(str(key), value)
        attributes.update((str(k), v) for k, v in context.items())
        attributes.update((str(k), v) for k, v in payload.items())
        self._add_exception_or_backtrace(attributes, event)
        return attributes, message, level

    def _forwardable(self, event: LogEvent) -> bool:
        # own diagnostics are dropped silently
        if event.name in SELF_LOGGER_NAMES:
            return False
        reason = self._suppression_reason()
        if reason is None:
            return True
        _log.debug("log_event_suppressed", reason=reason, event_logger=event.name)
        return False

    def _suppression_reason(self) -> str | None:
        if not self.backend.is_available():
            return "backend_unavailable"
        if not self.backend.is_initialized():
            return "backend_not_initialized"
        if self.backend.logger is None:
            return "no_log_sink"
        return None

    def _base_attributes(self, event: LogEvent, transaction_name: Any) -> dict[str, Any]:
        base: dict[str, Any] = {
            "origin": ORIGIN,
            "logger": event.name,
            "application": self.application,
            "environment": self.environment,
            "host": self.host,
            "thread": event.thread_name,
            "transaction": transaction_name,
            "time": event.time,
            "duration_ms": event.duration,
            "metric": event.metric,
            "metric_amount": event.metric_amount,
        }
        return {k: v for k, v in base.items() if v is not None}

    @staticmethod
    def _add_exception_or_backtrace(attributes: dict[str, Any], event: LogEvent) -> None:
        exception = event.exception
        if exception is not None:
            if isinstance(exception, BaseException):
                exception = ExceptionInfo.from_exception(exception)
            attributes["exception_class"] = exception.class_name
            attributes["exception_message"] = exception.message
            attributes["exception_backtrace"] = list(exception.backtrace or ())
        elif event.backtrace is not None:
            attributes["backtrace"] = list(event.backtrace)


__all__ = [
    "INTERNAL_LOGGER_NAME",
    "LogForwarder",
    "MAX_TAG_KEY_LENGTH",
    "MAX_TAG_VALUE_LENGTH",
    "ORIGIN",
    "SELF_LOGGER_NAMES",
    "USER_KEYS",
    "extract_tags",
    "extract_user",
    "resolve_sink_method",
]
