# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Collaborator contracts and in-memory adapters."""

from .base import FormAssociation, OptionsSource, Renderer, Unsubscribe
from .memory import InMemoryForm, InMemoryRenderer, TagNode

__all__ = [
    "FormAssociation",
    "InMemoryForm",
    "InMemoryRenderer",
    "OptionsSource",
    "Renderer",
    "TagNode",
    "Unsubscribe",
]
