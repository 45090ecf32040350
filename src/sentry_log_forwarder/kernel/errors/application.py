"""Application-layer errors — raised while wiring the forwarder."""

from __future__ import annotations

from sentry_log_forwarder.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    code = "application_error"


__all__ = ["ApplicationError"]
