"""Config settings – EnvSettingsLoader, DotenvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Mapping

from sentry_log_forwarder.config.settings.forwarder import ForwarderSettings, env_variable


class SettingsLoader(abc.ABC):
    """Port: build :class:`ForwarderSettings` from an external source."""

    @abc.abstractmethod
    def load(self) -> ForwarderSettings: ...


class EnvSettingsLoader(SettingsLoader):
    """Read ``SENTRY_*`` variables from *environ* (``os.environ`` by default).

    Unset, empty or blank variables keep the field's default.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self) -> ForwarderSettings:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, str] = {}
        for field in dataclasses.fields(ForwarderSettings):
            raw = (environ.get(env_variable(field.name)) or "").strip()
            if raw:
                values[field.name] = raw
        return ForwarderSettings(**values)


class DotenvSettingsLoader(SettingsLoader):
    """Load a ``.env`` file into ``os.environ``, then read it like ``EnvSettingsLoader``."""

    def __init__(self, env_file: str = ".env", override: bool = False) -> None:
        self._env_file = env_file
        self._override = override

    def load(self) -> ForwarderSettings:
        try:
            from dotenv import load_dotenv  # type: ignore[import-untyped]
        except ImportError as exc:
            raise ImportError("Install 'sentry-log-forwarder[dotenv]' to use DotenvSettingsLoader") from exc
        load_dotenv(self._env_file, override=self._override)
        return EnvSettingsLoader().load()


def load_forwarder_settings(loader: SettingsLoader | None = None) -> ForwarderSettings:
    """Load :class:`ForwarderSettings`, from the environment by default."""
    return (loader or EnvSettingsLoader()).load()


__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "SettingsLoader", "load_forwarder_settings"]
