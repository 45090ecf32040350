"""
sentry_log_forwarder – forward application log events to Sentry structured logs.

Import path convention::

    from sentry_log_forwarder import LogForwarder, LogEvent
    from sentry_log_forwarder.observability.logging import SentryLogHandler, tagged
    from sentry_log_forwarder.testing import FakeLogBackend, RecordingLogSink
"""

from sentry_log_forwarder.observability.logging import (
    ExceptionInfo,
    LogEvent,
    LogForwarder,
    SentryLogHandler,
    SentryLogsProcessor,
    tagged,
)

__version__ = "0.1.0"
__all__ = [
    "ExceptionInfo",
    "LogEvent",
    "LogForwarder",
    "SentryLogHandler",
    "SentryLogsProcessor",
    "__version__",
    "tagged",
]
