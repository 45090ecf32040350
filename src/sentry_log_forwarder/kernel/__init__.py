"""Kernel – framework-agnostic building blocks shared by every layer."""

from sentry_log_forwarder.kernel.errors import (
    ApplicationError,
    BaseError,
    ForwarderError,
    InvalidFilterError,
    InvalidLevelError,
    UnknownFormatterError,
)
from sentry_log_forwarder.kernel.levels import Level, level_token

__all__ = [
    "ApplicationError",
    "BaseError",
    "ForwarderError",
    "InvalidFilterError",
    "InvalidLevelError",
    "Level",
    "UnknownFormatterError",
    "level_token",
]
