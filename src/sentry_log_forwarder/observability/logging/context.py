"""Observability – ambient tags attached to every event logged in a block."""
from __future__ import annotations

import contextlib
from contextvars import ContextVar
from types import MappingProxyType
from typing import Any, Iterator, Mapping

_TAGS_VAR: ContextVar[tuple[str, ...]] = ContextVar("_slf_tags", default=())
_NAMED_TAGS_VAR: ContextVar[Mapping[str, Any]] = ContextVar(
    "_slf_named_tags", default=MappingProxyType({})
)


@contextlib.contextmanager
def tagged(*tags: str, **named_tags: Any) -> Iterator[None]:
    """Attach *tags* and *named_tags* to events logged inside the block.

    Blocks nest: inner tags are appended and inner named tags override outer
    ones with the same key.  Each thread and asyncio task sees its own tags.

    Usage::

        with tagged("checkout", user_id=42, transaction_name="POST /orders"):
            logger.info("order placed")
    """
    tags_token = _TAGS_VAR.set((*_TAGS_VAR.get(), *tags))
    named_token = _NAMED_TAGS_VAR.set(MappingProxyType({**_NAMED_TAGS_VAR.get(), **named_tags}))
    try:
        yield
    finally:
        _NAMED_TAGS_VAR.reset(named_token)
        _TAGS_VAR.reset(tags_token)


def current_tags() -> tuple[str, ...]:
    return _TAGS_VAR.get()


def current_named_tags() -> dict[str, Any]:
    """Return a copy of the named tags active in this context."""
    return dict(_NAMED_TAGS_VAR.get())


__all__ = ["current_named_tags", "current_tags", "tagged"]
