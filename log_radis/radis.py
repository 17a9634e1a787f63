# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""GELF message builder that pushes messages onto a Redis list.

Radis (from *radio* and *Redis*) caches GELF messages in a Redis list. A
collector pops them from the other end of the list (for example with
BRPOPLPUSH, which gives a reliable queue) and forwards them to Graylog.

Example:
    >>> from log_radis import Radis
    >>> radis = Radis(server="localhost:6379", queue="graylog-radis:queue")
    >>> radis.log("error", "This is a non-urgent error", user_id=42)
"""

import json
import logging
import socket
import time
from collections.abc import Callable, Mapping
from typing import Any

from .exceptions import MissingLevelError, MissingMessageError
from .fields import normalize_fields
from .levels import resolve_level
from .queue_client import create_redis_client, ensure_queue_client

logger = logging.getLogger(__name__)

GELF_SPEC_VERSION = "1.1"

DEFAULT_QUEUE = "graylog-radis:queue"
DEFAULT_SERVER = "localhost:6379"
DEFAULT_RECONNECT = 5
DEFAULT_EVERY = 1

HOSTNAME = socket.gethostname()


def _trim(text: str) -> str:
    """Remove carriage returns, then surrounding whitespace."""
    return text.replace("\r", "").strip()


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def encode_gelf(gelf: Mapping[str, Any]) -> str:
    """Serialize a GELF field mapping to a compact, ASCII-only JSON object string."""
    return json.dumps(dict(gelf), separators=(",", ":"), default=str)


class Radis:
    """Formats log events as GELF and enqueues them onto a Redis list.

    A Radis holds no mutable state besides its configuration; thread safety
    of concurrent log() calls depends entirely on the queue client.
    """

    def __init__(
        self,
        queue: str = DEFAULT_QUEUE,
        server: str = DEFAULT_SERVER,
        reconnect: float = DEFAULT_RECONNECT,
        every: float = DEFAULT_EVERY,
        redis: Any = None,
        default_level: str | int | None = None,
        hostname: str = HOSTNAME,
        clock: Callable[[], float] = time.time,
    ):
        """Initialize Radis.

        Args:
            queue: Name of the list GELF messages are pushed onto
            server: Redis server (host:port, unix socket path or redis:// URL)
            reconnect: Seconds the default client keeps retrying, 0 disables
            every: Milliseconds between reconnect attempts
            redis: Queue client to use instead of building a redis.Redis.
                Any object implementing lpush() is accepted, including
                redis.asyncio clients (log() then returns an awaitable).
            default_level: Level used when log() is called without one
            hostname: Host reported when the caller does not override it
            clock: Returns the current time in seconds since the epoch

        Raises:
            ValueError: If queue is empty
            TypeError: If redis does not implement lpush()
        """
        if not queue:
            raise ValueError("Queue name is required")

        self.queue = queue
        self.server = server
        self.reconnect = reconnect
        self.every = every
        self.hostname = hostname
        self.clock = clock
        self._redis = ensure_queue_client(redis) if redis is not None else None
        self._default_level = default_level

    @property
    def redis(self) -> Any:
        """Queue client, built from server/reconnect/every on first use."""
        if self._redis is None:
            self._redis = create_redis_client(
                server=self.server,
                reconnect=self.reconnect,
                every=self.every,
            )
        return self._redis

    @redis.setter
    def redis(self, client: Any) -> None:
        self._redis = ensure_queue_client(client)

    @property
    def default_level(self) -> str | int | None:
        """Level used when log() is called without one."""
        return self._default_level

    @default_level.setter
    def default_level(self, level: str | int | None) -> None:
        self._default_level = level

    def log(self, level: str | int | None, message: Any, /, **fields: Any) -> Any:
        """Build a GELF message and push it onto the queue.

        Additional fields are turned into underscore-prefixed vendor
        fields. ``host``/``hostname`` and ``time``/``timestamp`` override
        the system hostname and the current time; ``message`` and
        ``full_message`` set the full message, ``short_message`` the short
        one. Fields whose value is None are ignored.

        A multi-line message is split at the first newline into
        short_message and full_message; a single-line message is sent as
        ``message``.

        Args:
            level: Level name ("info", "warn", ...) or single digit. Falls
                back to default_level when None, empty, 0 or "0".
            message: Log message
            **fields: Additional GELF fields

        Returns:
            Result of the queue client's lpush()

        Raises:
            MissingMessageError: If message is None
            MissingLevelError: If no level is given and no default level is set
        """
        if message is None:
            raise MissingMessageError()

        if not level or level == "0":
            level = self._default_level
        if level is None:
            raise MissingLevelError()

        gelf = normalize_fields(fields, hostname=self.hostname, clock=self.clock)

        message = _trim(str(message))
        if "\n" in message:
            short, full = message.split("\n", 1)
            gelf["short_message"] = _trim("  ".join([short, _text(gelf.get("short_message"))]))
            gelf["full_message"] = _trim("\n".join([full, _text(gelf.get("full_message"))]))
        else:
            gelf["message"] = message

        gelf["version"] = GELF_SPEC_VERSION
        gelf["level"] = resolve_level(level)

        return self.push(gelf)

    def push(self, gelf: Mapping[str, Any] | str | bytes) -> Any:
        """Raw-push a GELF message onto the queue.

        Mappings are encoded to a JSON string. Strings and bytes are pushed
        as they are; they are not validated, so be careful what you push.

        Args:
            gelf: GELF field mapping or an already serialized message

        Returns:
            Result of the queue client's lpush()

        Raises:
            TypeError: If gelf is neither a mapping nor a string
            Exception: Whatever the queue client raises, unchanged
        """
        if isinstance(gelf, Mapping):
            payload: str | bytes = encode_gelf(gelf)
        elif isinstance(gelf, (str, bytes)):
            payload = gelf
        else:
            raise TypeError(
                f"GELF message must be a mapping or a serialized string, got {type(gelf).__name__}"
            )

        logger.debug(f"Pushing message onto {self.queue} (length {len(payload)})")
        return self.redis.lpush(self.queue, payload)
