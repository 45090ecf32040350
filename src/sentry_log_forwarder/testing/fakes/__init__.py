"""Testing fakes – in-memory doubles for the backend ports."""
from sentry_log_forwarder.testing.fakes.sentry import FakeLogBackend, LogCall, RecordingLogSink

__all__ = ["FakeLogBackend", "LogCall", "RecordingLogSink"]
