# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Suggestion filtering over a live options source."""

from __future__ import annotations

from collections.abc import Iterable

from ..collaborators.base import OptionsSource
from ..models import Option


class AutocompleteIndex:
    """Filters candidates per query; never caches the options source between calls."""

    def __init__(self, source: OptionsSource, *, min_query_length: int = 1):
        self.source = source
        self.min_query_length = max(min_query_length, 1)

    def options(self) -> list[Option]:
        return self.source.read_options()

    def candidates(self, query: str | None, used_values: Iterable[str] = ()) -> list[Option]:
        text = query or ""
        if len(text) < self.min_query_length:
            return []
        needle = text.lower()
        used = set(used_values)
        return [
            option
            for option in self.options()
            if needle in option.label.lower() and option.value not in used
        ]

    def suggest(self, query: str | None, used_values: Iterable[str] = ()) -> list[str]:
        return [option.label for option in self.candidates(query, used_values)]

    def find(self, label_or_value: str, used_values: Iterable[str] = ()) -> Option | None:
        """Resolve a picked suggestion; labels match before values."""
        used = set(used_values)
        options = [option for option in self.options() if option.value not in used]
        for option in options:
            if option.label == label_or_value:
                return option
        for option in options:
            if option.value == label_or_value:
                return option
        return None

    def is_known(self, value: str) -> bool:
        return any(option.value == value for option in self.options())
