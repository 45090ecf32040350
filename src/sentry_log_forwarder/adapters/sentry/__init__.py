"""Sentry adapter – backend and leveled log sink over ``sentry_sdk``."""
from sentry_log_forwarder.adapters.sentry.backend import SentryLogSink, SentrySdkBackend

__all__ = ["SentryLogSink", "SentrySdkBackend"]
