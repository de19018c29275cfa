# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Option sources feeding autocomplete."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any

from ..collaborators.base import OptionsSource
from ..models import Option

logger = logging.getLogger(__name__)


def _coerce_options(raw_items: Iterable[Any] | None) -> list[Option]:
    options: list[Option] = []
    for raw in raw_items or []:
        option = Option.from_any(raw)
        if option is None:
            logger.debug("Dropping unusable option %r", raw)
            continue
        options.append(option)
    return options


class StaticOptions(OptionsSource):
    """
    Wraps a caller-owned list.

    The list is kept by reference, so edits made by its owner show up on the next read.
    """

    def __init__(self, items: list[Any] | None = None):
        self.items = items if items is not None else []

    def read_options(self) -> list[Option]:
        return _coerce_options(self.items)


class FunctionOptions(OptionsSource):
    """Calls a provider on every read."""

    def __init__(self, provider: Callable[[], Iterable[Any]]):
        self._provider = provider

    def read_options(self) -> list[Option]:
        return _coerce_options(self._provider())


def as_option_source(source: Any) -> OptionsSource | None:
    """Normalize None, an OptionsSource, a callable or a list into an OptionsSource."""
    if source is None:
        return None
    if hasattr(source, "read_options"):
        return source
    if callable(source):
        return FunctionOptions(source)
    if isinstance(source, list):
        return StaticOptions(source)
    if isinstance(source, Iterable) and not isinstance(source, (str, bytes)):
        return StaticOptions(list(source))
    raise TypeError(f"Unsupported options source: {type(source).__name__}")


class LayeredOptions(OptionsSource):
    """
    Explicitly referenced source first, nested source as fallback.

    The explicit reference wins whenever it is set, even if it currently yields no
    options; clearing it falls back to the nested source on the next read.
    """

    def __init__(self, explicit: Any = None, nested: Any = None):
        self.explicit = as_option_source(explicit)
        self.nested = as_option_source(nested)

    def set_explicit(self, source: Any) -> None:
        self.explicit = as_option_source(source)

    def set_nested(self, source: Any) -> None:
        self.nested = as_option_source(source)

    def read_options(self) -> list[Option]:
        if self.explicit is not None:
            return self.explicit.read_options()
        if self.nested is not None:
            return self.nested.read_options()
        return []
