# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Store <-> structure reconciliation, form projection and notifications."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any

from ..autocomplete import AutocompleteIndex
from ..collaborators.base import FormAssociation, Renderer, Unsubscribe
from ..errors import CollaboratorContractError
from ..models import ChangeKind, CollectionChange, ItemChange, Tag
from ..store import CursorController, TagStore
from .context import get_mutation_context, mutation_context, notifications_suppressed
from .validity import ValidityGate

logger = logging.getLogger(__name__)

EVENT_UPDATE = "update"
EVENT_CHANGE = "change"
EMPTY_PROJECTION = [""]


class SyncBridge:
    """
    Keeps the tag store, the renderer's nodes and the form value consistent.

    Store edits are mirrored onto nodes with observation paused, so the renderer's
    change callback never feeds the bridge's own edits back. Out-of-band node edits
    rebuild the store from the nodes. Inside `transaction()` the form projection and
    the "change" notification are deferred to the outermost exit.
    """

    def __init__(
        self,
        store: TagStore,
        cursor: CursorController,
        renderer: Renderer,
        form: FormAssociation,
        autocomplete: AutocompleteIndex,
        validity: ValidityGate,
        *,
        name: str | None = None,
        required: bool = False,
    ):
        self.store = store
        self.cursor = cursor
        self.renderer = renderer
        self.form = form
        self.autocomplete = autocomplete
        self.validity = validity
        self.name = name
        self.required = required
        self.initialized = False
        self._handles: dict[str, Any] = {}
        self._projected: list[str] = []
        self._paused = 0
        self._depth = 0
        self._unsubscribe: Unsubscribe | None = None
        self._listeners: dict[str, list[Callable[[Any], None]]] = {EVENT_UPDATE: [], EVENT_CHANGE: []}

    # Lifecycle

    def attach(self) -> None:
        if self._unsubscribe is None:
            self._unsubscribe = self.renderer.on_structural_change(self.structure_changed)
        self.rebuild()

    def detach(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    @property
    def attached(self) -> bool:
        return self._unsubscribe is not None

    @contextmanager
    def paused(self) -> Iterator[None]:
        self._paused += 1
        try:
            yield
        finally:
            self._paused -= 1

    @contextmanager
    def transaction(self) -> Iterator[None]:
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
            if self._depth == 0:
                self.sync_value()

    # Notifications

    def on(self, event: str, callback: Callable[[Any], None]) -> None:
        if event not in self._listeners:
            raise ValueError(f"Unknown event: {event!r}")
        self._listeners[event].append(callback)

    def off(self, event: str, callback: Callable[[Any], None]) -> None:
        listeners = self._listeners.get(event, [])
        if callback in listeners:
            listeners.remove(callback)

    def _emit(self, event: str, payload: Any) -> None:
        for callback in list(self._listeners[event]):
            callback(payload)

    # Store -> structure

    def tag_added(self, tag: Tag, index: int) -> None:
        """
        Create the node for a newly stored tag.

        The handle is checked after the store already holds the tag; once a
        CollaboratorContractError is raised the editor state is undefined.
        """
        with self.paused():
            handle = self.renderer.create_node(tag.value, tag.label, index)
        self._check_handle(handle)
        self._handles[tag.value] = handle
        if not notifications_suppressed():
            is_new = not self.autocomplete.is_known(tag.value)
            self._emit(EVENT_UPDATE, ItemChange(tag=tag.value, kind=ChangeKind.ADDED, is_new=is_new))
        if self._depth == 0:
            self.sync_value()

    def tag_removed(self, tag: Tag, index: int) -> None:
        handle = self._handles.pop(tag.value, None)
        if handle is None:
            logger.warning("No node tracked for removed tag %r at %d", tag.value, index)
        else:
            with self.paused():
                self.renderer.destroy_node(handle)
        if not notifications_suppressed():
            self._emit(EVENT_UPDATE, ItemChange(tag=tag.value, kind=ChangeKind.REMOVED))
        if self._depth == 0:
            self.sync_value()

    def _check_handle(self, handle: Any) -> None:
        expected = getattr(self.renderer, "handle_type", object)
        if handle is None or not isinstance(handle, expected):
            raise CollaboratorContractError(
                f"Renderer returned {type(handle).__name__}, expected {expected.__name__}"
            )

    def handle_for(self, value: str) -> Any:
        return self._handles.get(value)

    # Structure -> store

    def structure_changed(self) -> None:
        if self._paused:
            return
        self.rebuild()

    def rebuild(self) -> None:
        """Rebuild the store from the renderer's current nodes, dropping what the store cannot hold."""
        with mutation_context(origin="structure"):
            self._rebuild()

    def _rebuild(self) -> None:
        with self.paused():
            kept: list[Tag] = []
            handles: dict[str, Any] = {}
            dropped: list[Any] = []
            limit = self.store.max_tags
            for record in self.renderer.read_nodes():
                value = record.effective_value
                if not value:
                    logger.debug("Node %r has no value; using empty string", record.handle)
                if value in handles or (limit is not None and len(kept) >= limit):
                    dropped.append(record.handle)
                    continue
                kept.append(Tag(value, record.effective_label))
                handles[value] = record.handle
            for handle in dropped:
                self.renderer.destroy_node(handle)
            self.store.replace(kept)
            self._handles = handles
            self.cursor.reset(len(kept))
        if dropped:
            logger.debug("Dropped %d node(s) during rebuild", len(dropped))
        if self._depth == 0:
            self.sync_value()

    # Form projection

    def sync_value(self) -> None:
        context = get_mutation_context()
        values = self.store.values()
        previous = self._projected
        self._projected = values
        self.form.set_projected_value(self.name, values or list(EMPTY_PROJECTION))
        self.validity.update(self.required, len(values))
        logger.debug("Synced %d tag(s) (origin=%s)", len(values), context.origin or "-")
        if self.initialized and not context.suppress_notifications and values != previous:
            self.form.notify_change()
            self._emit(EVENT_CHANGE, CollectionChange(values=list(values)))

    def refresh_projection(self) -> None:
        self.form.set_projected_value(self.name, self._projected or list(EMPTY_PROJECTION))

    def set_required(self, required: bool) -> None:
        self.required = required
        self.validity.update(required, len(self.store))
