# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Severity names and their numeric GELF levels."""

import re
from typing import Any

# Syslog-style scale, 1 is the most severe.
# crit and critical intentionally differ; existing consumers rely on it.
LEVELS: dict[str, int] = {
    "fatal": 1,
    "emerg": 1,
    "emergency": 1,
    "alert": 2,
    "crit": 2,
    "critical": 3,
    "error": 4,
    "err": 4,
    "warn": 5,
    "warning": 5,
    "note": 6,
    "notice": 6,
    "info": 7,
    "debug": 8,
    "trace": 9,
    "core": 9,
}

_NUMERIC_LEVEL = re.compile(r"[0-9]")


def resolve_level(level: Any) -> int | None:
    """Resolve a level token to its numeric severity.

    A single digit is taken as the numeric level itself. Anything else is
    looked up case-insensitively in LEVELS.

    Args:
        level: Level name (e.g. "warn"), digit string or int

    Returns:
        Numeric level, or None if the token is not recognized
    """
    token = str(level)
    if _NUMERIC_LEVEL.fullmatch(token):
        return int(token)
    return LEVELS.get(token.lower())
