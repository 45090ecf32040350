"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from sentry_log_forwarder.observability.logging.filters import SensitiveFieldsFilter
from sentry_log_forwarder.observability.logging.forwarder import LogForwarder
from sentry_log_forwarder.observability.logging.processors import SentryLogsProcessor


class JsonLoggerFactory:
    """Configure structlog for JSON output, optionally forwarding to Sentry."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        sensitive_fields: frozenset[str] | None = None,
        forwarder: LogForwarder | None = None,
    ) -> None:
        """Install a JSON-rendering root handler.

        Redaction runs after every enriching processor, contextvars
        included.  When *forwarder* is given a :class:`SentryLogsProcessor`
        is placed last in the shared chain, so Sentry never sees the
        redacted values.
        """
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]
        if sensitive_fields:
            _filter = SensitiveFieldsFilter(sensitive_fields)

            def _redact(logger: Any, method: Any, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
                return _filter.redact_deep(event_dict)

            shared_processors.append(_redact)
        if forwarder is not None:
            shared_processors.append(SentryLogsProcessor(forwarder))

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.JSONRenderer(default=str),
            ],
        )
        handler = logging.StreamHandler()
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["JsonLoggerFactory"]
