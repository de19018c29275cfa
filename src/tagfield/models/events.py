# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Notification and validity models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ChangeKind(str, Enum):
    ADDED = "added"
    REMOVED = "removed"


@dataclass(frozen=True)
class ItemChange:
    """Per-item notification ("update"): one tag added or removed."""

    tag: str
    kind: ChangeKind
    is_new: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"tag": self.tag, "kind": self.kind.value}
        if self.is_new is not None:
            payload["is_new"] = self.is_new
        return payload


@dataclass(frozen=True)
class CollectionChange:
    """Collection-level notification ("change"); carries no per-item detail."""

    values: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Validity:
    valid: bool
    message: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"valid": self.valid, "message": self.message}
