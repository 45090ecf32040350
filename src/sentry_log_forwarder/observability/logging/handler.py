"""Observability – SentryLogHandler, the stdlib :mod:`logging` front-end."""
from __future__ import annotations

import logging
from typing import Any

from sentry_log_forwarder.observability.logging.forwarder import LogForwarder
from sentry_log_forwarder.observability.logging.protocol import LogEvent


class SentryLogHandler(logging.Handler):
    """Forward stdlib log records to Sentry structured logs.

    Typical usage::

        import sentry_sdk
        sentry_sdk.init(dsn=..., enable_logs=True)
        logging.getLogger().addHandler(SentryLogHandler(level="warning", application="billing"))

        log.info("charged", extra={"payload": {"amount": 42}, "named_tags": {"user_id": 7}})

    Keyword options other than *forwarder* build a :class:`LogForwarder`;
    note that *formatter* is the forwarder's context formatter, not a
    :class:`logging.Formatter`.  Forwarding failures go through
    :meth:`logging.Handler.handleError` like any other handler's.
    """

    def __init__(self, forwarder: LogForwarder | None = None, **options: Any) -> None:
        super().__init__()
        self.forwarder = forwarder if forwarder is not None else LogForwarder(**options)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            event = LogEvent.from_record(record)
            if self.forwarder.should_forward(event):
                self.forwarder.handle(event)
        except RecursionError:
            raise
        except Exception:  # noqa: BLE001
            self.handleError(record)


__all__ = ["SentryLogHandler"]
