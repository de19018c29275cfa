# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""
tagfield package entrypoint.

This package provides the synchronization engine behind an editable, ordered
collection of unique tags: an ordered tag store, an insertion cursor with a
two-press delete protocol, autocomplete over a live options source, and a bridge
that mirrors the store onto externally owned nodes and a form value. Rendering,
form association and option sources are abstracted behind injectable
collaborator protocols, and domain objects are modeled with typed dataclasses.
"""

from .autocomplete import AutocompleteIndex, LayeredOptions, StaticOptions
from .collaborators import (
    FormAssociation,
    InMemoryForm,
    InMemoryRenderer,
    OptionsSource,
    Renderer,
    TagNode,
)
from .config import EditorSettings, load_editor_settings
from .editor import Key, TagEditor
from .errors import CollaboratorContractError, RejectReason, TagFieldError
from .log import setup_logging
from .models import ChangeKind, CollectionChange, ItemChange, NodeRecord, Option, Tag, Validity
from .store import CursorController, DeleteState, TagStore
from .sync import SyncBridge, ValidityGate, mutation_context
from .version import __version__

__all__ = [
    "AutocompleteIndex",
    "ChangeKind",
    "CollaboratorContractError",
    "CollectionChange",
    "CursorController",
    "DeleteState",
    "EditorSettings",
    "FormAssociation",
    "InMemoryForm",
    "InMemoryRenderer",
    "ItemChange",
    "Key",
    "LayeredOptions",
    "NodeRecord",
    "Option",
    "OptionsSource",
    "RejectReason",
    "Renderer",
    "StaticOptions",
    "SyncBridge",
    "Tag",
    "TagEditor",
    "TagFieldError",
    "TagNode",
    "TagStore",
    "Validity",
    "ValidityGate",
    "load_editor_settings",
    "mutation_context",
    "setup_logging",
    "__version__",
]
