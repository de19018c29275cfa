# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level tag editor facade wiring store, cursor, autocomplete and sync."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from enum import Enum
from typing import Any

from .autocomplete import AutocompleteIndex, LayeredOptions
from .collaborators import FormAssociation, InMemoryForm, InMemoryRenderer, Renderer
from .config import EditorSettings, load_editor_settings
from .models import Option, Tag, Validity
from .store import CursorController, DeleteKey, TagStore
from .sync import SyncBridge, ValidityGate, mutation_context

logger = logging.getLogger(__name__)


class Key(str, Enum):
    BACKSPACE = "backspace"
    DELETE = "delete"
    COMMA = "comma"
    TAB = "tab"
    ENTER = "enter"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PASTE = "paste"
    CHARACTER = "character"
    # mobile keyboards report a composite key code instead of the real key
    COMPOSITE = "composite"


_DELETE_KEYS = {Key.BACKSPACE: DeleteKey.BACKSPACE, Key.DELETE: DeleteKey.DELETE}
_NAVIGATION_KEYS = {Key.LEFT, Key.RIGHT, Key.HOME, Key.END}


def _parse_submit_keys(names: Iterable[str]) -> frozenset[Key]:
    keys = set()
    for name in names:
        try:
            keys.add(Key(name))
        except ValueError:
            logger.debug("Ignoring unknown submit key %r", name)
    return frozenset(keys)


class TagEditor:
    """
    Editable, ordered collection of unique tags bound to a renderer and a form.

    The programmatic API (`add`, `remove`, `set_values`, ...) and the keyboard model
    (`type_text`, `keydown`, `keyup`) both mutate the same TagStore; the SyncBridge
    mirrors every mutation onto the renderer and the form. Nodes already present in
    the renderer become the initial tags without a "change" notification.
    """

    def __init__(
        self,
        renderer: Renderer | None = None,
        form: FormAssociation | None = None,
        *,
        name: str | None = None,
        multiple: bool = False,
        required: bool = False,
        options: Any = None,
        nested_options: Any = None,
        settings: EditorSettings | None = None,
    ):
        self.settings = settings or load_editor_settings()
        self.renderer = renderer if renderer is not None else InMemoryRenderer()
        self.form = form if form is not None else InMemoryForm()
        self.option_source = LayeredOptions(options, nested_options)
        self.autocomplete = AutocompleteIndex(self.option_source, min_query_length=self.settings.min_query_length)
        self.cursor = CursorController()
        self.store = TagStore(
            max_tags=None if multiple else 1,
            delimiter=self.settings.delimiter,
            trim_tags=self.settings.trim_tags,
            preserve_case=self.settings.preserve_case,
            on_add=self._tag_added,
            on_remove=self._tag_removed,
        )
        self.validity = ValidityGate(self.form, message=self.settings.required_message)
        self.bridge = SyncBridge(
            self.store,
            self.cursor,
            self.renderer,
            self.form,
            self.autocomplete,
            self.validity,
            name=name,
            required=required,
        )
        self.submit_keys = _parse_submit_keys(self.settings.submit_keys)
        self.buffer = ""
        self.disabled = False
        self.focused = False
        self._pasting = False
        self.connect()

    # Lifecycle

    def connect(self) -> None:
        self.bridge.initialized = False
        self.bridge.attach()
        self.bridge.initialized = True

    def disconnect(self) -> None:
        self.bridge.detach()

    @property
    def connected(self) -> bool:
        return self.bridge.attached

    def _tag_added(self, tag: Tag, index: int) -> None:
        self.cursor.on_insert(index, len(self.store))
        self.bridge.tag_added(tag, index)

    def _tag_removed(self, tag: Tag, index: int) -> None:
        self.cursor.on_remove(index, len(self.store))
        self.bridge.tag_removed(tag, index)

    # Properties

    @property
    def name(self) -> str | None:
        return self.bridge.name

    @property
    def multiple(self) -> bool:
        return self.store.max_tags is None

    @property
    def required(self) -> bool:
        return self.bridge.required

    @property
    def tags(self) -> list[str]:
        return self.store.values()

    @property
    def labels(self) -> list[str]:
        return self.store.labels()

    @property
    def value(self) -> list[str]:
        return self.store.values()

    @value.setter
    def value(self, values: Iterable[str]) -> None:
        self.set_values(values)

    @property
    def options(self) -> list[str]:
        return [option.value for option in self.autocomplete.options()]

    # Programmatic API

    def add(self, tags: str | Iterable[str], index: int | None = None) -> list[Tag]:
        with self.bridge.transaction():
            return self.store.add(tags, index)

    def add_at(self, tag: str | Iterable[str], index: int) -> list[Tag]:
        return self.add(tag, index)

    def remove(self, tag: str) -> bool:
        with self.bridge.transaction():
            return self.store.remove(tag)

    def remove_all(self) -> None:
        with self.bridge.transaction():
            self.store.remove_all()
            self.cursor.reset(0)

    def has(self, tag: str) -> bool:
        return self.store.has(tag)

    def set_values(self, values: Iterable[str]) -> None:
        """Replace all tags; one "change" at most, no per-item "update"."""
        items = [values] if isinstance(values, str) else list(values or [])
        with self.bridge.transaction():
            with mutation_context(suppress_notifications=True, origin="set_values"):
                self.store.remove_all()
                if items:
                    self.store.add(items)

    def reset(self) -> None:
        self.remove_all()
        self.buffer = ""

    def check_validity(self) -> bool:
        return self.validity.check(self.required, len(self.store))

    def report_validity(self) -> Validity:
        return self.validity.report(self.required, len(self.store))

    @contextmanager
    def suppressed(self) -> Iterator[None]:
        with mutation_context(suppress_notifications=True):
            yield

    def on(self, event: str, callback: Callable[[Any], None]) -> None:
        self.bridge.on(event, callback)

    def off(self, event: str, callback: Callable[[Any], None]) -> None:
        self.bridge.off(event, callback)

    # Configuration changes

    def set_name(self, name: str | None) -> None:
        self.bridge.name = name
        self.bridge.refresh_projection()

    def set_multiple(self, multiple: bool) -> None:
        self.store.max_tags = None if multiple else 1
        self.bridge.rebuild()

    def set_required(self, required: bool) -> None:
        self.bridge.set_required(required)

    def set_option_source(self, source: Any) -> None:
        self.option_source.set_explicit(source)

    def set_nested_options(self, source: Any) -> None:
        self.option_source.set_nested(source)

    def disable(self) -> None:
        self.disabled = True
        self.cursor.disarm()

    def enable(self) -> None:
        self.disabled = False

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False
        self.cursor.disarm()

    # Autocomplete

    def suggest(self, query: str | None = None) -> list[str]:
        return self.autocomplete.suggest(self.buffer if query is None else query, self.store.values())

    def select_suggestion(self, choice: Option | str) -> Tag | None:
        """Add a picked suggestion with its own value and label, then clear the buffer."""
        if self.disabled:
            return None
        option = choice if isinstance(choice, Option) else self.autocomplete.find(choice, self.store.values())
        if option is None:
            logger.debug("No option matches selection %r", choice)
            return None
        with self.bridge.transaction():
            tag = self.store.add_tag(option.value, option.label, self.cursor.position)
        self.buffer = ""
        self.cursor.disarm()
        return tag

    # Keyboard model

    def type_text(self, text: str) -> None:
        if self.disabled:
            return
        self.buffer += text
        self.cursor.disarm()

    def set_buffer(self, text: str) -> None:
        self.buffer = text
        self.cursor.disarm()

    def keydown(self, key: Key | str) -> None:
        if self.disabled:
            return
        key = Key(key)
        self._pasting = key is Key.PASTE

        if key in self.submit_keys and self.buffer != "":
            self._confirm_buffer()
            return

        if key in _NAVIGATION_KEYS:
            self._navigate(key)
            return

        if not len(self.store):
            return

        delete_key = _DELETE_KEYS.get(key)
        if delete_key is None:
            self.cursor.disarm()
            return
        index = self.cursor.press(delete_key, buffer_empty=self.buffer == "", values=self.store.values())
        if index is not None:
            with self.bridge.transaction():
                self.store.remove_at(index)

    def keyup(self, key: Key | str) -> None:
        if self.disabled:
            return
        key = Key(key)
        self.cursor.release()

        if key is Key.COMPOSITE:
            self._composite_keyup()
            return

        if self._pasting and self.buffer != "":
            self._pasting = False
            self._confirm_buffer()

    def add_from_buffer(self) -> list[Tag]:
        with self.bridge.transaction():
            added = self.store.add(self.buffer)
        self.buffer = ""
        return added

    def _confirm_buffer(self) -> list[Tag]:
        text = self.buffer
        delimiter = self.store.delimiter
        if self.store.trim_tags:
            if text.startswith(delimiter):
                text = text[len(delimiter) :]
            text = text.strip()
        with self.bridge.transaction():
            added = self.store.add(text, self.cursor.position)
        if added:
            self.buffer = ""
        return added

    def _composite_keyup(self) -> None:
        delimiter = self.store.delimiter
        if self.buffer == "":
            values = self.store.values()
            if values:
                self.remove(values[-1])
            return
        if self.buffer.endswith(delimiter):
            text = self.buffer[: -len(delimiter)]
            self.add(text)
            self.buffer = ""

    def _navigate(self, key: Key) -> None:
        length = len(self.store)
        if key is Key.LEFT:
            self.cursor.move(-1, length)
        elif key is Key.RIGHT:
            self.cursor.move(1, length)
        elif key is Key.HOME:
            self.cursor.move_to(0, length)
        else:
            self.cursor.move_to(length, length)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"TagEditor(name={self.name!r}, tags={self.tags!r})"
