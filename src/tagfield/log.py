# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Logging helpers for tagfield."""

from __future__ import annotations

import logging
import os

PACKAGE_LOGGER = "tagfield"
LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def _env_level() -> str:
    return os.getenv("TAGFIELD_LOG_LEVEL", "WARNING")


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Configure logging for CLI use and return the package logger.

    Only the `tagfield` logger is raised or lowered to `level` (or TAGFIELD_LOG_LEVEL);
    the root logger stays at WARNING so other libraries keep quiet at DEBUG.
    Unknown level names fall back to WARNING.
    """
    name = (level or _env_level()).strip().upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        numeric = logging.WARNING
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(numeric)
    return package_logger


__all__ = ["LOG_FORMAT", "PACKAGE_LOGGER", "setup_logging"]
