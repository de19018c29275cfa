# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Configuration helpers for tagfield."""

import os
from dataclasses import dataclass, field

DEFAULT_REQUIRED_MESSAGE = "Please fill out this field."
DEFAULT_SUBMIT_KEYS = ("comma", "tab", "enter")


def _int_env(name: str, default: int) -> int:
    try:
        value = os.getenv(name)
        return int(value) if value is not None else default
    except ValueError:
        return default


def _bool_env(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


def _keys_env(name: str, default: tuple[str, ...]) -> tuple[str, ...]:
    value = os.getenv(name)
    if value is None:
        return default
    keys = tuple(part.strip().lower() for part in value.split(",") if part.strip())
    return keys or default


@dataclass
class EditorSettings:
    """Tag editor defaults."""

    delimiter: str = ","
    trim_tags: bool = True
    preserve_case: bool = True
    min_query_length: int = 1
    submit_keys: tuple[str, ...] = field(default=DEFAULT_SUBMIT_KEYS)
    required_message: str = DEFAULT_REQUIRED_MESSAGE

    @classmethod
    def from_env(cls) -> "EditorSettings":
        """Create settings from environment variables (evaluated at call time)."""
        min_query_length = _int_env("TAGFIELD_MIN_QUERY_LENGTH", cls.min_query_length)
        if min_query_length < 1:
            min_query_length = cls.min_query_length
        return cls(
            delimiter=_str_env("TAGFIELD_DELIMITER", cls.delimiter),
            trim_tags=_bool_env("TAGFIELD_TRIM_TAGS", cls.trim_tags),
            preserve_case=_bool_env("TAGFIELD_PRESERVE_CASE", cls.preserve_case),
            min_query_length=min_query_length,
            submit_keys=_keys_env("TAGFIELD_SUBMIT_KEYS", DEFAULT_SUBMIT_KEYS),
            required_message=_str_env("TAGFIELD_REQUIRED_MESSAGE", cls.required_message),
        )


def load_editor_settings() -> EditorSettings:
    """Load editor settings from environment with sensible defaults."""
    return EditorSettings.from_env()
