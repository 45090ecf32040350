"""Testing – in-memory doubles for applications that use the forwarder."""
from sentry_log_forwarder.testing.fakes import FakeLogBackend, LogCall, RecordingLogSink

__all__ = ["FakeLogBackend", "LogCall", "RecordingLogSink"]
