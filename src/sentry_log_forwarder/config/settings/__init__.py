"""Config settings – ``SENTRY_*`` environment configuration."""
from sentry_log_forwarder.config.settings.forwarder import ENV_PREFIX, ForwarderSettings, env_variable
from sentry_log_forwarder.config.settings.loaders import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsLoader,
    load_forwarder_settings,
)

__all__ = [
    "DotenvSettingsLoader",
    "ENV_PREFIX",
    "EnvSettingsLoader",
    "ForwarderSettings",
    "SettingsLoader",
    "env_variable",
    "load_forwarder_settings",
]
