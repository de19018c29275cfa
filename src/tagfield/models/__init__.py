# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Model exports."""

from .events import ChangeKind, CollectionChange, ItemChange, Validity
from .tag import NodeRecord, Option, Tag

__all__ = [
    "ChangeKind",
    "CollectionChange",
    "ItemChange",
    "NodeRecord",
    "Option",
    "Tag",
    "Validity",
]
