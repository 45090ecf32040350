"""Config validation errors."""
from sentry_log_forwarder.config.validation.errors import ConfigError, InvalidSettingValueError

__all__ = ["ConfigError", "InvalidSettingValueError"]
