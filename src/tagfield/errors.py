# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Error taxonomy and exception helpers."""

from enum import Enum
from typing import Optional


class RejectReason(str, Enum):
    NONE = "NONE"
    EMPTY = "EMPTY"
    DUPLICATE = "DUPLICATE"
    LIMIT_REACHED = "LIMIT_REACHED"
    NOT_TEXT = "NOT_TEXT"


class TagFieldError(Exception):
    """Base class for hard failures raised by tagfield."""


class CollaboratorContractError(TagFieldError):
    """
    A collaborator broke its contract (wrong handle kind, unknown handle, ...).

    Always a programming error; never recovered locally.
    """


def reject_reason_to_message(reason: Optional[RejectReason]) -> str:
    """User-facing reason string."""
    mapping = {
        RejectReason.EMPTY: "Tag is empty",
        RejectReason.DUPLICATE: "Tag already present",
        RejectReason.LIMIT_REACHED: "Tag limit reached",
        RejectReason.NOT_TEXT: "Tag is not text",
        RejectReason.NONE: "",
        None: "",
    }
    return mapping.get(reason, "Tag rejected")


__all__ = [
    "CollaboratorContractError",
    "RejectReason",
    "TagFieldError",
    "reject_reason_to_message",
]
