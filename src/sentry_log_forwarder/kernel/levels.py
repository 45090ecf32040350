"""Kernel – severity levels understood by the forwarder."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from sentry_log_forwarder.kernel.errors import InvalidLevelError


class Level(str, Enum):
    """Log severities, lowest first.

    Values match the function names exposed by ``sentry_sdk.logger`` so a
    level can be used directly as the sink method name.
    """

    TRACE = "trace"
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"

    @property
    def rank(self) -> int:
        return _ORDER.index(self)

    def at_least(self, other: "Level") -> bool:
        """Return ``True`` when this level is as severe as *other* or more."""
        return self.rank >= other.rank

    @classmethod
    def from_stdlib(cls, levelno: int) -> "Level":
        """Map a :mod:`logging` numeric level onto a :class:`Level`."""
        if levelno >= logging.CRITICAL:
            return cls.FATAL
        if levelno >= logging.ERROR:
            return cls.ERROR
        if levelno >= logging.WARNING:
            return cls.WARNING
        if levelno >= logging.INFO:
            return cls.INFO
        if levelno >= logging.DEBUG:
            return cls.DEBUG
        return cls.TRACE

    @classmethod
    def lookup(cls, value: Any) -> "Level | None":
        """Return the matching level, or ``None`` when *value* is not one."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls.from_stdlib(value)
        if isinstance(value, Enum):
            value = value.value
        if isinstance(value, str):
            return _ALIASES.get(value.strip().lower())
        return None

    @classmethod
    def coerce(cls, value: Any) -> "Level":
        """Like :meth:`lookup` but raise :class:`InvalidLevelError` on a miss."""
        level = cls.lookup(value)
        if level is None:
            raise InvalidLevelError(value)
        return level


_ORDER: tuple[Level, ...] = tuple(Level)

_ALIASES: dict[str, Level] = {
    **{level.value: level for level in Level},
    "notset": Level.TRACE,
    "warn": Level.WARNING,
    "critical": Level.FATAL,
}


def level_token(value: Any) -> str:
    """Canonical lowercase severity token for *value*.

    Known levels and their aliases collapse onto the :class:`Level` value;
    anything else is lower-cased as-is so the sink lookup can fall back.
    """
    level = Level.lookup(value)
    if level is not None:
        return level.value
    if isinstance(value, Enum):
        value = value.value
    return str(value).lower()


__all__ = ["Level", "level_token"]
