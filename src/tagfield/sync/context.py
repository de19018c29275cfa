# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
Per-mutation ambient context.

A ContextVar-backed MutationContext carries flags that shape how a store
mutation is reported (currently whether notifications are suppressed). Callers
scope it with `mutation_context(...)` instead of toggling editor state.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class MutationContext:
    suppress_notifications: bool = False
    origin: str | None = None


_current_mutation_context: ContextVar[MutationContext | None] = ContextVar(
    "tagfield_mutation_context", default=None
)


def get_mutation_context() -> MutationContext:
    """Return the current ambient mutation context."""
    return _current_mutation_context.get() or MutationContext()


def notifications_suppressed() -> bool:
    return get_mutation_context().suppress_notifications


@contextmanager
def mutation_context(**overrides: Any) -> Iterator[MutationContext]:
    """
    Context manager that layers overrides onto the ambient MutationContext.

    None-valued overrides are ignored to preserve outer context values.
    """
    current = get_mutation_context()
    filtered = {key: value for key, value in overrides.items() if value is not None}
    new_context = replace(current, **filtered) if filtered else current
    token = _current_mutation_context.set(new_context)
    try:
        yield new_context
    finally:
        _current_mutation_context.reset(token)


__all__ = [
    "MutationContext",
    "get_mutation_context",
    "mutation_context",
    "notifications_suppressed",
]
