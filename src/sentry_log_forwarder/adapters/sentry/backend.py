"""Sentry adapter – SentrySdkBackend, SentryLogSink.

``sentry_sdk.logger`` functions take a ``str.format`` template plus
keyword parameters and only format the template when parameters are
given.  :class:`SentryLogSink` never passes parameters: the message is
sent as the literal body and the attributes go through ``attributes=``
so they reach Sentry under their own names.
"""
from __future__ import annotations

import importlib
import sys
from types import ModuleType
from typing import Any


class SentryLogSink:
    """Leveled structured-log sink backed by the ``sentry_sdk.logger`` module."""

    def __init__(self, module: ModuleType) -> None:
        self._module = module

    def _capture(self, function: str, message: Any, attributes: dict[str, Any]) -> None:
        getattr(self._module, function)(str(message), attributes=attributes)

    def trace(self, message: Any, /, **attributes: Any) -> None:
        self._capture("trace", message, attributes)

    def debug(self, message: Any, /, **attributes: Any) -> None:
        self._capture("debug", message, attributes)

    def info(self, message: Any, /, **attributes: Any) -> None:
        self._capture("info", message, attributes)

    def warning(self, message: Any, /, **attributes: Any) -> None:
        self._capture("warning", message, attributes)

    # common alias
    warn = warning

    def error(self, message: Any, /, **attributes: Any) -> None:
        self._capture("error", message, attributes)

    def fatal(self, message: Any, /, **attributes: Any) -> None:
        self._capture("fatal", message, attributes)


class SentrySdkBackend:
    """The process-wide ``sentry_sdk`` client.

    The SDK counts as available once the application has imported it;
    this backend never imports ``sentry_sdk`` on the application's behalf.
    """

    def _sdk(self) -> ModuleType | None:
        return sys.modules.get("sentry_sdk")

    def is_available(self) -> bool:
        return self._sdk() is not None

    def is_initialized(self) -> bool:
        sdk = self._sdk()
        return sdk is not None and bool(sdk.is_initialized())

    @property
    def logger(self) -> SentryLogSink | None:
        """Sink over ``sentry_sdk.logger``; ``None`` on SDKs without logs support."""
        if self._sdk() is None:
            return None
        try:
            module = importlib.import_module("sentry_sdk.logger")
        except ImportError:
            return None
        return SentryLogSink(module)


__all__ = ["SentryLogSink", "SentrySdkBackend"]
