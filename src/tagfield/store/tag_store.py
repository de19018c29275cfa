# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Ordered, unique tag storage."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from ..errors import RejectReason, reject_reason_to_message
from ..models import Tag

logger = logging.getLogger(__name__)

TagHook = Callable[[Tag, int], None]


def clamp(value: int, low: int, high: int) -> int:
    return min(max(value, low), high)


class TagStore:
    """
    Ordered tag collection keyed by exact `value`.

    Rejected input (empty, duplicate, over the limit, not text) is dropped silently;
    `on_add` / `on_remove` hooks see every accepted insert and removal with its index.
    """

    def __init__(
        self,
        *,
        max_tags: int | None = None,
        delimiter: str = ",",
        trim_tags: bool = True,
        preserve_case: bool = True,
        on_add: TagHook | None = None,
        on_remove: TagHook | None = None,
    ):
        self._tags: list[Tag] = []
        self._seen: set[str] = set()
        self.max_tags = max_tags
        self.delimiter = delimiter or ","
        self.trim_tags = trim_tags
        self.preserve_case = preserve_case
        self.on_add = on_add
        self.on_remove = on_remove

    def format(self, text: str) -> str:
        return text if self.preserve_case else text.lower()

    def _prepare(self, text: str) -> str:
        if self.trim_tags:
            text = text.strip()
        return self.format(text)

    def check(self, value: Any) -> RejectReason:
        if not isinstance(value, str):
            return RejectReason.NOT_TEXT
        if not value.strip():
            return RejectReason.EMPTY
        if self.max_tags is not None and len(self._tags) >= self.max_tags:
            return RejectReason.LIMIT_REACHED
        if value in self._seen:
            return RejectReason.DUPLICATE
        return RejectReason.NONE

    def can_add(self, value: Any) -> bool:
        return self.check(value) is RejectReason.NONE

    def add(self, raw: str | Iterable[Any], index: int | None = None) -> list[Tag]:
        """
        Add delimiter-separated text, or a list of such strings, in order.

        When `index` is given, each accepted tag is inserted there and the insertion
        point advances by one; otherwise tags are appended.
        """
        items = [raw] if isinstance(raw, str) else raw
        if items is None or not isinstance(items, Iterable):
            logger.debug("Ignoring non-text tag input %r", raw)
            return []

        added: list[Tag] = []
        position = index
        for item in items:
            if not isinstance(item, str):
                logger.debug("Skipping non-text batch item %r", item)
                continue
            for segment in item.split(self.delimiter):
                value = self._prepare(segment)
                reason = self.check(value)
                if reason is not RejectReason.NONE:
                    logger.debug("Rejected tag %r: %s", value, reject_reason_to_message(reason))
                    continue
                tag = Tag(value)
                inserted_at = self._insert(tag, position)
                # on_add listeners may have removed the tag again
                if tag.value in self._seen:
                    added.append(tag)
                if position is not None:
                    current = self.index_of(tag.value)
                    position = current + 1 if current >= 0 else clamp(inserted_at, 0, len(self._tags))
        return added

    def add_tag(self, value: Any, label: str | None = None, index: int | None = None) -> Tag | None:
        """Add an already split value/label pair; no delimiter handling."""
        if not isinstance(value, str):
            logger.debug("Ignoring non-text tag value %r", value)
            return None
        value = self._prepare(value)
        reason = self.check(value)
        if reason is not RejectReason.NONE:
            logger.debug("Rejected tag %r: %s", value, reject_reason_to_message(reason))
            return None
        tag = Tag(value, label or value)
        self._insert(tag, index)
        return tag if tag.value in self._seen else None

    def _insert(self, tag: Tag, index: int | None) -> int:
        length = len(self._tags)
        position = clamp(length if index is None else index, 0, length)
        self._tags.insert(position, tag)
        self._seen.add(tag.value)
        if self.on_add is not None:
            self.on_add(tag, position)
        return position

    def remove(self, value: str) -> bool:
        """Remove the last tag whose value matches exactly."""
        for position in range(len(self._tags) - 1, -1, -1):
            if self._tags[position].value == value:
                self.remove_at(position)
                return True
        return False

    def remove_at(self, index: int) -> Tag | None:
        if not 0 <= index < len(self._tags):
            return None
        tag = self._tags.pop(index)
        if not any(other.value == tag.value for other in self._tags):
            self._seen.discard(tag.value)
        if self.on_remove is not None:
            self.on_remove(tag, index)
        return tag

    def remove_all(self) -> list[Tag]:
        removed: list[Tag] = []
        while self._tags:
            tag = self.remove_at(0)
            if tag is not None:
                removed.append(tag)
        return removed

    def replace(self, tags: Iterable[Tag]) -> None:
        """Swap the whole content without firing hooks (structural rebuilds)."""
        self._tags = list(tags)
        self._seen = {tag.value for tag in self._tags}

    def index_of(self, value: str) -> int:
        for position, tag in enumerate(self._tags):
            if tag.value == value:
                return position
        return -1

    def has(self, value: str) -> bool:
        return value in self._seen

    def values(self) -> list[str]:
        return [tag.value for tag in self._tags]

    def labels(self) -> list[str]:
        return [tag.label for tag in self._tags]

    def __contains__(self, value: object) -> bool:
        return isinstance(value, str) and self.has(value)

    def __iter__(self) -> Iterator[Tag]:
        return iter(list(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"TagStore({self.values()!r})"
