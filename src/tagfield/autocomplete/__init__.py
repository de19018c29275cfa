# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Autocomplete exports."""

from .index import AutocompleteIndex
from .sources import FunctionOptions, LayeredOptions, StaticOptions, as_option_source

__all__ = [
    "AutocompleteIndex",
    "FunctionOptions",
    "LayeredOptions",
    "StaticOptions",
    "as_option_source",
]
