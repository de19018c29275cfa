# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Insertion cursor and the two-press delete protocol."""

from __future__ import annotations

from enum import Enum

from .tag_store import clamp


class DeleteKey(str, Enum):
    BACKSPACE = "backspace"
    DELETE = "delete"


class DeleteState(str, Enum):
    IDLE = "idle"
    # adjacent tag highlighted; next delete press removes it
    ARMED = "armed"
    # a tag was removed during this key press; wait for key release
    LATCHED = "latched"


class CursorController:
    """
    Tracks where typed tags land and which tag a delete press targets.

    Backspace targets the tag before the cursor, forward-delete the tag at it.
    The first press with an empty buffer only arms the target; a second press on
    the same target removes it. A held key removes at most one tag until released.
    """

    def __init__(self, position: int = 0):
        self.position = max(position, 0)
        self.state = DeleteState.IDLE
        self.armed_value: str | None = None

    def on_insert(self, index: int, length: int) -> None:
        if index <= self.position:
            self.position = clamp(self.position + 1, 0, length)
        else:
            self.position = clamp(self.position, 0, length)

    def on_remove(self, index: int, length: int) -> None:
        if index < self.position:
            self.position = clamp(self.position - 1, 0, length)
        else:
            self.position = clamp(self.position, 0, length)

    def reset(self, length: int) -> None:
        self.position = max(length, 0)
        self.disarm()

    def move(self, delta: int, length: int) -> None:
        self.position = clamp(self.position + delta, 0, length)
        self.disarm()

    def move_to(self, position: int, length: int) -> None:
        self.position = clamp(position, 0, length)
        self.disarm()

    def target(self, key: DeleteKey, length: int) -> int | None:
        if length <= 0:
            return None
        if key is DeleteKey.DELETE:
            return clamp(self.position, 0, length - 1)
        return clamp(self.position - 1, 0, length - 1)

    def press(self, key: DeleteKey, *, buffer_empty: bool, values: list[str]) -> int | None:
        """Feed one delete-class key press; returns the index to remove, if any."""
        index = self.target(key, len(values))
        if index is None:
            return None
        if not buffer_empty:
            self.disarm()
            return None
        if self.state is DeleteState.LATCHED:
            return None
        value = values[index]
        if self.state is DeleteState.ARMED and self.armed_value == value:
            self.state = DeleteState.LATCHED
            self.armed_value = None
            return index
        self.state = DeleteState.ARMED
        self.armed_value = value
        return None

    def release(self) -> None:
        if self.state is DeleteState.LATCHED:
            self.state = DeleteState.IDLE

    def disarm(self) -> None:
        if self.state is DeleteState.ARMED:
            self.state = DeleteState.IDLE
        self.armed_value = None

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"CursorController(position={self.position}, state={self.state.value})"
