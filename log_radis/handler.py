# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Standard library logging handler that ships records through Radis."""

import logging
from typing import Any

from .queue_client import ensure_sync_result
from .radis import Radis

# Standard LogRecord attributes; everything else came in through extra=
_RECORD_ATTRIBUTES = frozenset({
    "args", "asctime", "created", "exc_info", "exc_text", "filename",
    "funcName", "levelname", "levelno", "lineno", "message", "module",
    "msecs", "msg", "name", "pathname", "process", "processName",
    "relativeCreated", "stack_info", "taskName", "thread", "threadName",
})

# Ordered most severe first
_GELF_LEVELS = (
    (logging.CRITICAL, "critical"),
    (logging.ERROR, "error"),
    (logging.WARNING, "warning"),
    (logging.INFO, "info"),
    (logging.DEBUG, "debug"),
)


def gelf_level_name(levelno: int) -> str:
    """Map a stdlib logging level to a GELF level name.

    Custom levels map to the nearest named level below them; anything
    below DEBUG is sent as trace.
    """
    for threshold, name in _GELF_LEVELS:
        if levelno >= threshold:
            return name
    return "trace"


class RadisHandler(logging.Handler):
    """Logging handler that pushes each record onto a Radis queue as GELF.

    The formatted record (including any traceback) is the GELF message, so
    tracebacks end up in full_message. Record metadata and attributes
    passed with ``extra=`` become vendor fields.

    The Radis must use a synchronous queue client. With an asyncio client
    every record fails and is reported through handleError().

    Example:
        >>> handler = RadisHandler(Radis(server="redis:6379"))
        >>> logging.getLogger("app").addHandler(handler)
    """

    def __init__(self, radis: Radis, level: int = logging.NOTSET):
        super().__init__(level)
        self.radis = radis

    def fields_for(self, record: logging.LogRecord) -> dict[str, Any]:
        """Collect the GELF fields for a record."""
        fields: dict[str, Any] = {
            "time": record.created,
            "logger": record.name,
            "file": record.pathname,
            "line": record.lineno,
            "function": record.funcName,
            "process": record.process,
            "thread": record.threadName,
        }
        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES:
                fields[key] = value
        return fields

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            result = self.radis.log(gelf_level_name(record.levelno), message, **self.fields_for(record))
            ensure_sync_result(result, type(self).__name__)
        except Exception:
            self.handleError(record)
