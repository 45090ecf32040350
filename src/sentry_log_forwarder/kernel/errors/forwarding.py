"""Forwarder errors — invalid formatter, filter or level options."""

from __future__ import annotations

from typing import Any

from sentry_log_forwarder.kernel.errors.application import ApplicationError


class ForwarderError(ApplicationError):
    """The forwarder was given options it cannot work with."""

    code = "forwarder_error"


class UnknownFormatterError(ForwarderError):
    """A formatter was requested by a name that is not registered."""

    code = "unknown_formatter"

    def __init__(self, formatter: Any) -> None:
        super().__init__(f"Unknown formatter {formatter!r}", formatter=repr(formatter))
        self.formatter = formatter


class InvalidFilterError(ForwarderError):
    """The ``filter`` option is neither a pattern nor a predicate."""

    code = "invalid_filter"

    def __init__(self, value: Any) -> None:
        kind = type(value).__name__
        super().__init__(f"Filter must be a regex pattern or a callable, got {kind}", filter_type=kind)
        self.value = value


class InvalidLevelError(ForwarderError):
    """A severity could not be mapped onto a :class:`Level`."""

    code = "invalid_level"

    def __init__(self, value: Any) -> None:
        super().__init__(f"Unknown log level {value!r}", level=repr(value))
        self.value = value


__all__ = [
    "ForwarderError",
    "InvalidFilterError",
    "InvalidLevelError",
    "UnknownFormatterError",
]
