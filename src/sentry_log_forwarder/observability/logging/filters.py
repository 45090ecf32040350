"""Observability – event filters and SensitiveFieldsFilter."""
from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any, Callable

from sentry_log_forwarder.kernel.errors import InvalidFilterError

if TYPE_CHECKING:
    from sentry_log_forwarder.observability.logging.protocol import LogEvent

EventFilter = Callable[["LogEvent"], bool]

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset({
    "password", "passwd", "secret", "token", "api_key", "apikey",
    "authorization", "credit_card", "card_number", "cvv", "ssn",
})


def _accept_all(event: "LogEvent") -> bool:  # noqa: ARG001
    return True


def build_event_filter(option: Any) -> EventFilter:
    """Turn the ``filter`` option into a predicate over :class:`LogEvent`.

    * ``None`` – accept every event.
    * ``str`` / compiled pattern – ``re.search`` against the logger name.
    * callable – used as-is.
    """
    if option is None:
        return _accept_all
    if isinstance(option, str):
        option = re.compile(option)
    if isinstance(option, re.Pattern):
        pattern = option

        def _match_name(event: "LogEvent") -> bool:
            return pattern.search(event.name) is not None

        return _match_name
    if callable(option):
        return option
    raise InvalidFilterError(option)


class SensitiveFieldsFilter:
    """Replace values of sensitive keys with ``[REDACTED]``."""

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def _is_sensitive(self, key: Any) -> bool:
        return str(key).lower() in self._fields

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if self._is_sensitive(k) else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        """Recursively redact nested dicts."""
        result: dict[str, Any] = {}
        for k, v in data.items():
            if self._is_sensitive(k):
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "EventFilter", "SensitiveFieldsFilter", "build_event_filter"]
