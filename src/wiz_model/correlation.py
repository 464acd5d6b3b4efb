"""Correlation IDs that group the log lines of one classification.

The active ID lives in a context variable, so threads and asyncio tasks each
see their own. ``from_descriptor`` opens a scope that joins the caller's ID
when one is active and starts a new one otherwise.
"""

from __future__ import annotations

import contextvars
import uuid
from collections.abc import Iterator
from contextlib import contextmanager

__all__ = [
    "correlation_context",
    "get_correlation_id",
    "new_correlation_id",
]

_active_id: contextvars.ContextVar[str | None] = contextvars.ContextVar("wiz_correlation_id", default=None)


def new_correlation_id() -> str:
    """Return a fresh ID (UUID4 hex, 32 chars)."""
    return uuid.uuid4().hex


def get_correlation_id() -> str | None:
    return _active_id.get()


@contextmanager
def correlation_context(correlation_id: str | None = None, *, join: bool = True) -> Iterator[str]:
    """Run a block under a correlation ID and restore the previous one after.

    An explicit ``correlation_id`` always wins. Without one the block reuses
    the active ID when ``join`` is true, and gets a new ID otherwise or when
    none is active.

    Example:
        with correlation_context("import-batch-7"):
            devices = [from_descriptor(d) for d in descriptors]
    """
    if correlation_id is None:
        active = _active_id.get() if join else None
        correlation_id = active or new_correlation_id()

    token = _active_id.set(correlation_id)
    try:
        yield correlation_id
    finally:
        _active_id.reset(token)
