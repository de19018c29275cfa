# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Deterministic in-memory collaborators for headless use and tests."""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

from ..errors import CollaboratorContractError
from ..models import NodeRecord, Validity
from .base import FormAssociation, Renderer, Unsubscribe

_node_ids = itertools.count(1)


@dataclass(eq=False)
class TagNode:
    """Stand-in for a rendered tag element: optional value attribute plus text."""

    value: str | None = None
    text: str = ""
    node_id: int = field(default_factory=lambda: next(_node_ids))

    @property
    def effective_value(self) -> str:
        return self.value or self.text

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"TagNode(#{self.node_id}, value={self.value!r}, text={self.text!r})"


class InMemoryRenderer(Renderer):
    """
    Ordered node list with synchronous change notifications.

    The `append`/`insert`/`remove`/`set_value`/`set_text`/`replace_all` helpers model
    edits made by code outside the engine; `batch()` coalesces them into one
    notification.
    """

    handle_type = TagNode

    def __init__(self, nodes: Iterable[TagNode] | None = None):
        self.nodes: list[TagNode] = list(nodes or [])
        self._listeners: list[Callable[[], None]] = []
        self._batch_depth = 0
        self._pending = False
        self.created: list[TagNode] = []
        self.destroyed: list[TagNode] = []

    @classmethod
    def from_values(cls, *items: str | tuple[str | None, str]) -> InMemoryRenderer:
        nodes = []
        for item in items:
            if isinstance(item, tuple):
                value, text = item
                nodes.append(TagNode(value=value, text=text))
            else:
                nodes.append(TagNode(value=item, text=item))
        return cls(nodes)

    def create_node(self, value: str, label: str, index: int | None = None) -> TagNode:
        node = TagNode(value=value, text=label)
        self._insert(node, index)
        self.created.append(node)
        self._changed()
        return node

    def destroy_node(self, handle: Any) -> None:
        if handle not in self.nodes:
            raise CollaboratorContractError(f"Unknown node handle: {handle!r}")
        self.nodes.remove(handle)
        self.destroyed.append(handle)
        self._changed()

    def read_nodes(self) -> list[NodeRecord]:
        return [NodeRecord(handle=node, value=node.value, text=node.text) for node in self.nodes]

    def on_structural_change(self, callback: Callable[[], None]) -> Unsubscribe:
        self._listeners.append(callback)

        def _unsubscribe() -> None:
            if callback in self._listeners:
                self._listeners.remove(callback)

        return _unsubscribe

    @property
    def values(self) -> list[str]:
        return [node.effective_value for node in self.nodes]

    @property
    def texts(self) -> list[str]:
        return [node.text for node in self.nodes]

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    # Out-of-band edits

    def append(self, value: str | None = None, text: str = "") -> TagNode:
        return self.insert(len(self.nodes), value=value, text=text)

    def insert(self, index: int, value: str | None = None, text: str = "") -> TagNode:
        node = TagNode(value=value, text=text)
        self._insert(node, index)
        self._changed()
        return node

    def remove(self, node: TagNode) -> None:
        self.destroy_node(node)

    def set_value(self, node: TagNode, value: str | None) -> None:
        node.value = value
        self._changed()

    def set_text(self, node: TagNode, text: str) -> None:
        node.text = text
        self._changed()

    def replace_all(self, nodes: Iterable[TagNode]) -> None:
        self.nodes = list(nodes)
        self._changed()

    @contextmanager
    def batch(self) -> Iterator[None]:
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0 and self._pending:
                self._pending = False
                self._notify()

    def _insert(self, node: TagNode, index: int | None) -> None:
        length = len(self.nodes)
        position = length if index is None else min(max(index, 0), length)
        self.nodes.insert(position, node)

    def _changed(self) -> None:
        if self._batch_depth:
            self._pending = True
            return
        self._notify()

    def _notify(self) -> None:
        for callback in list(self._listeners):
            callback()


class InMemoryForm(FormAssociation):
    """Records what the engine pushes to the surrounding form."""

    def __init__(self):
        self.entries: list[tuple[str, str]] = []
        self.values: list[str] = []
        self.validity = Validity(valid=True)
        self.reports: list[Validity] = []
        self.change_count = 0

    def set_projected_value(self, name: str | None, values: list[str]) -> None:
        self.values = list(values)
        self.entries = [(name or "", value) for value in values]

    def set_validity(self, validity: Validity) -> None:
        self.validity = validity

    def report_validity(self, validity: Validity) -> None:
        self.validity = validity
        self.reports.append(validity)

    def notify_change(self) -> None:
        self.change_count += 1
