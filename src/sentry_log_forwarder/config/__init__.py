"""Config – ``SENTRY_*`` settings for the forwarder."""

from sentry_log_forwarder.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ForwarderSettings,
    SettingsLoader,
    load_forwarder_settings,
)
from sentry_log_forwarder.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "ForwarderSettings",
    "InvalidSettingValueError",
    "SettingsLoader",
    "load_forwarder_settings",
]
