"""Config settings – ForwarderSettings.

Labels attached to every forwarded event.  They are read from the same
``SENTRY_*`` variables the Sentry SDK itself honours, so a process that
sets ``SENTRY_ENVIRONMENT`` for the SDK gets the same label on its logs.
"""
from __future__ import annotations

import dataclasses

from sentry_log_forwarder.config.validation import InvalidSettingValueError
from sentry_log_forwarder.kernel.levels import Level

ENV_PREFIX = "SENTRY_"


@dataclasses.dataclass
class ForwarderSettings:
    """Ambient forwarder configuration; field ``x`` is read from ``SENTRY_X``."""

    environment: str | None = None
    application: str | None = None
    host: str | None = None
    level: str = "info"

    def __post_init__(self) -> None:
        if Level.lookup(self.level) is None:
            raise InvalidSettingValueError(env_variable("level"), self.level, "not a known log level")


def env_variable(field_name: str) -> str:
    """Environment variable holding the ``field_name`` setting."""
    return f"{ENV_PREFIX}{field_name.upper()}"


__all__ = ["ENV_PREFIX", "ForwarderSettings", "env_variable"]
