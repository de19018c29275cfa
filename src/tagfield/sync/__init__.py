# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Synchronization exports."""

from .bridge import EVENT_CHANGE, EVENT_UPDATE, SyncBridge
from .context import MutationContext, get_mutation_context, mutation_context, notifications_suppressed
from .validity import ValidityGate

__all__ = [
    "EVENT_CHANGE",
    "EVENT_UPDATE",
    "MutationContext",
    "SyncBridge",
    "ValidityGate",
    "get_mutation_context",
    "mutation_context",
    "notifications_suppressed",
]
