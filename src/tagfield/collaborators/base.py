# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Collaborator protocols the engine talks to."""

from collections.abc import Callable
from typing import Any, Protocol

from ..models import NodeRecord, Option, Validity

Unsubscribe = Callable[[], None]


class Renderer(Protocol):
    """
    Owner of the structural nodes that mirror the tag store.

    `handle_type` declares what `create_node` returns; anything else is a contract
    violation.
    """

    handle_type: type

    def create_node(self, value: str, label: str, index: int | None = None) -> Any: ...

    def destroy_node(self, handle: Any) -> None: ...

    def read_nodes(self) -> list[NodeRecord]: ...

    def on_structural_change(self, callback: Callable[[], None]) -> Unsubscribe: ...


class FormAssociation(Protocol):
    """Receives the computed form value and validity."""

    def set_projected_value(self, name: str | None, values: list[str]) -> None: ...

    def set_validity(self, validity: Validity) -> None: ...

    def report_validity(self, validity: Validity) -> None: ...

    def notify_change(self) -> None: ...


class OptionsSource(Protocol):
    """Read-only candidate list, re-read on every query."""

    def read_options(self) -> list[Option]: ...
