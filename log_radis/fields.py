# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Normalization of caller-supplied fields into GELF message fields.

Additional GELF fields must be prefixed with an underscore and may only
contain word characters, dots and hyphens. Callers pass plain names
(``user_id=42``) and this module turns them into vendor fields
(``_user_id``). A few names are not vendor fields at all: they override
the top-level ``host``, ``timestamp``, ``short_message`` and
``full_message`` keys instead.
"""

import logging
import re
import warnings
from collections.abc import Callable, Mapping
from typing import Any

from .exceptions import ReservedFieldWarning

logger = logging.getLogger(__name__)

_VENDOR_FIELD = re.compile(r"_[\w.\-]+", re.IGNORECASE)
_INVALID_CHARS = re.compile(r"[^\w.\-]+")

# Assigned by the aggregator on receipt.
RESERVED_FIELDS = frozenset({"_id"})

# (alias, target) pairs applied in order; a later alias for the same
# target wins, so _host beats _hostname and _timestamp beats _time.
FIELD_ALIASES: tuple[tuple[str, str], ...] = (
    ("_hostname", "host"),
    ("_host", "host"),
    ("_time", "timestamp"),
    ("_timestamp", "timestamp"),
    ("_message", "full_message"),
    ("_full_message", "full_message"),
    ("_short_message", "short_message"),
)


def sanitize_field_name(name: Any) -> str:
    """Turn a caller field name into a GELF vendor field name.

    Names that already look like vendor fields are lowercased. Other names
    lose every character outside ``[\\w.-]`` and get an underscore prefix.

    Args:
        name: Caller-supplied field name

    Returns:
        Vendor field name
    """
    name = str(name)
    if _VENDOR_FIELD.fullmatch(name):
        return name.lower()
    return "_" + _INVALID_CHARS.sub("", name)


def normalize_fields(
    fields: Mapping[Any, Any] | None,
    hostname: str,
    clock: Callable[[], float],
) -> dict[str, Any]:
    """Build the GELF field mapping for a message from caller fields.

    Fields whose value is None are dropped. The ``_id`` field is dropped
    with a ReservedFieldWarning. Host and timestamp default to
    ``hostname`` and ``clock()``; the timestamp is always emitted as a
    string because the aggregator mishandles JSON floats.

    Args:
        fields: Caller-supplied fields, may be None
        hostname: Host reported when the caller does not override it
        clock: Returns the current time in seconds since the epoch

    Returns:
        New mapping holding vendor fields plus host, timestamp and any
        short_message/full_message overrides
    """
    gelf: dict[str, Any] = {
        sanitize_field_name(name): value
        for name, value in (fields or {}).items()
        if value is not None
    }

    for field_name in sorted(gelf.keys() & RESERVED_FIELDS):
        logger.warning(f"Dropping reserved GELF field '{field_name}'")
        warnings.warn(ReservedFieldWarning(field_name), stacklevel=3)
        del gelf[field_name]

    for alias, target in FIELD_ALIASES:
        if alias in gelf:
            gelf[target] = gelf.pop(alias)

    if gelf.get("host") is None:
        gelf["host"] = hostname

    if gelf.get("timestamp") is None:
        gelf["timestamp"] = clock()
    gelf["timestamp"] = str(gelf["timestamp"])

    return gelf
