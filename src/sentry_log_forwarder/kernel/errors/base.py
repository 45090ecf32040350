"""Root error class for the sentry-log-forwarder error hierarchy.

Errors are raised while a forwarder is being configured, usually at
application start-up, and are meant to be logged before the process
gives up.  :meth:`BaseError.to_dict` therefore returns flat key/values
that can be handed straight to a structlog call::

    except BaseError as exc:
        log.error("log_forwarder_misconfigured", **exc.to_dict())
"""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    ``code`` is fixed per subclass.  Keyword arguments become ``detail``:
    the offending option or setting, already reduced to strings or numbers.
    """

    code: str = "base_error"

    def __init__(self, message: str, **detail: Any) -> None:
        super().__init__(message)
        self.message = message
        self.detail: dict[str, Any] = detail

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """Every detail key prefixed ``error_``, plus ``error_code`` and ``error``."""
        fields: dict[str, Any] = {f"error_{key}": value for key, value in self.detail.items()}
        fields.update(error_code=self.code, error=self.message)
        return fields


__all__ = ["BaseError"]
