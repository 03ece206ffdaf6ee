"""
rolegate.observability.context

Operation-scoped logging context.

Responsibilities:
- Generate an id for every use-case invocation.
- Bind operation metadata into structlog contextvars for the duration of the call.
"""

from __future__ import annotations

import uuid
from collections.abc import Iterator
from contextlib import contextmanager

import structlog


@contextmanager
def operation_scope(operation: str, *, actor_id: str | None = None) -> Iterator[str]:
    operation_id = str(uuid.uuid4())
    tokens = structlog.contextvars.bind_contextvars(
        operation_id=operation_id,
        operation=operation,
        actor_id=actor_id,
    )
    try:
        yield operation_id
    finally:
        # Restore the previous values so nested or concurrent flows do not leak.
        structlog.contextvars.reset_contextvars(**tokens)


# --- Module Notes -----------------------------------------------------------
# Each asyncio task has its own contextvars copy, so concurrent callers never
# see each other's operation ids.
