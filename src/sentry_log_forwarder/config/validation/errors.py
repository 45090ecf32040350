"""Config validation errors – raised while reading ``SENTRY_*`` settings."""
from __future__ import annotations

from typing import Any

from sentry_log_forwarder.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Forwarder settings could not be loaded."""
    code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A ``SENTRY_*`` variable holds a value the forwarder cannot use."""
    code = "invalid_setting_value"

    def __init__(self, variable: str, value: Any, reason: str) -> None:
        super().__init__(
            f"{variable}={value!r} is invalid: {reason}",
            variable=variable,
            value=repr(value),
            reason=reason,
        )
        self.variable = variable
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
