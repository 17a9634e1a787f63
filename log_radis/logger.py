# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Structured logger interface and its Radis-backed implementation."""

import logging
import sys
import traceback
from abc import ABC, abstractmethod
from typing import Any

from .queue_client import ensure_sync_result
from .radis import Radis


class Logger(ABC):
    """Structured logger: each method takes a message plus keyword fields."""

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, **kwargs: Any) -> None: ...

    @abstractmethod
    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error from inside an exception handler."""


class RadisLogger(Logger):
    """Logger that ships every message as GELF through a Radis.

    Structured keyword data becomes GELF vendor fields, and the logger
    name is sent as ``_logger``. The Radis must use a synchronous queue
    client; an asyncio client raises TypeError on every call.
    """

    # Logger level -> (stdlib level for filtering, GELF level name)
    _LEVELS = {
        "DEBUG": (logging.DEBUG, "debug"),
        "INFO": (logging.INFO, "info"),
        "WARNING": (logging.WARNING, "warning"),
        "ERROR": (logging.ERROR, "error"),
    }

    def __init__(self, radis: Radis, level: str = "INFO", name: str | None = None):
        """Initialize Radis logger.

        Args:
            radis: Radis the messages are pushed through
            level: Minimum level to ship (DEBUG, INFO, WARNING, ERROR)
            name: Optional logger name for identification
        """
        self.radis = radis
        self.level = level.upper()
        self.name = name or "radis"

        if self.level not in self._LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(self._LEVELS.keys())}")

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if self._LEVELS[level][0] < self._LEVELS[self.level][0]:
            return

        kwargs.setdefault("logger", self.name)
        result = self.radis.log(self._LEVELS[level][1], message, **kwargs)
        ensure_sync_result(result, type(self).__name__)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error-level message with the active traceback.

        The traceback follows the message on its own lines, so it ends up
        in the GELF full_message.
        """
        kwargs.pop("exc_info", None)
        if sys.exc_info()[0] is not None:
            message = f"{message}\n{traceback.format_exc()}"
        self._log("ERROR", message, **kwargs)
