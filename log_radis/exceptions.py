# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions and warnings raised while building GELF messages."""

from redis.exceptions import RedisError

# Failures from the queue client are never wrapped; this alias only gives
# callers a stable name to catch for the default Redis client.
TransportError = RedisError


class RadisError(Exception):
    """Base exception for log-radis errors."""
    pass


class MissingLevelError(RadisError, ValueError):
    """Raised when a message is logged without a level and no default level is set."""

    def __init__(self, message: str = "log message without level"):
        super().__init__(message)


class MissingMessageError(RadisError, ValueError):
    """Raised when a message is logged without message text."""

    def __init__(self, message: str = "log message without message"):
        super().__init__(message)


class ReservedFieldWarning(UserWarning):
    """Issued when a caller supplies a field the log aggregator assigns itself.

    The offending field is dropped and the message is still queued.
    """

    def __init__(self, field_name: str):
        """Initialize ReservedFieldWarning.

        Args:
            field_name: Sanitized name of the dropped field (e.g. "_id")
        """
        super().__init__(f"log message with field '{field_name}' is not allowed")
        self.field_name = field_name
