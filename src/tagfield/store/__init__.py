# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Store exports."""

from .cursor import CursorController, DeleteKey, DeleteState
from .tag_store import TagStore, clamp

__all__ = [
    "CursorController",
    "DeleteKey",
    "DeleteState",
    "TagStore",
    "clamp",
]
