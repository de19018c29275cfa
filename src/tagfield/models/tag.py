# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Tag and option value objects."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Tag:
    """
    One entry of the collection.

    `value` is the identity used for uniqueness, removal and the form projection;
    `label` is display text and defaults to `value`.
    """

    value: str
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.value)


@dataclass(frozen=True)
class Option:
    """Autocomplete candidate read from an options source."""

    value: str
    label: str = ""

    def __post_init__(self) -> None:
        if not self.label:
            object.__setattr__(self, "label", self.value)

    @classmethod
    def from_any(cls, raw: Any) -> Option | None:
        """Coerce a str, (value, label) pair, mapping or Option; None when unusable."""
        if isinstance(raw, Option):
            return raw
        if isinstance(raw, str):
            return cls(value=raw)
        if isinstance(raw, dict):
            value = raw.get("value")
            label = raw.get("label")
            if value is None and label is None:
                return None
            value = str(value if value is not None else label)
            return cls(value=value, label=str(label) if label is not None else "")
        if isinstance(raw, (tuple, list)) and len(raw) == 2:
            value, label = raw
            if value is None:
                return None
            return cls(value=str(value), label=str(label) if label is not None else "")
        return None


@dataclass
class NodeRecord:
    """
    Snapshot of one externally owned structural node.

    `value` is the node's value attribute (None when absent) and `text` its textual
    content; `handle` is the renderer's opaque reference.
    """

    handle: Any
    value: str | None = None
    text: str | None = None

    @property
    def effective_value(self) -> str:
        if self.value:
            return self.value
        return self.text or ""

    @property
    def effective_label(self) -> str:
        return self.text or self.effective_value
