"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError       (application.py)
        ├── ConfigError        (config/validation/errors.py)
        │   └── InvalidSettingValueError
        └── ForwarderError     (forwarding.py)
            ├── UnknownFormatterError
            ├── InvalidFilterError
            └── InvalidLevelError

Suppressing an event is never an error: :meth:`LogForwarder.handle`
reports it by returning ``False``.
"""

from sentry_log_forwarder.kernel.errors.application import ApplicationError
from sentry_log_forwarder.kernel.errors.base import BaseError
from sentry_log_forwarder.kernel.errors.forwarding import (
    ForwarderError,
    InvalidFilterError,
    InvalidLevelError,
    UnknownFormatterError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "ForwarderError",
    "InvalidFilterError",
    "InvalidLevelError",
    "UnknownFormatterError",
]
