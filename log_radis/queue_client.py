# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Queue clients that GELF messages are pushed onto.

A queue client is any object with an ``lpush(name, *values)`` method,
so a plain ``redis.Redis`` (or ``redis.asyncio.Redis``) instance works
as-is. Connection management and reconnects are the client's job.
Instances are shared by every caller of a Radis; they must be safe for
concurrent use if the host application logs from several threads.
"""

import inspect
import logging
from abc import ABC, abstractmethod
from typing import Any

import redis
from redis.backoff import ConstantBackoff, NoBackoff
from redis.retry import Retry

logger = logging.getLogger(__name__)

DEFAULT_REDIS_PORT = 6379

_URL_SCHEMES = ("redis://", "rediss://", "unix://")


class QueueClient(ABC):
    """Abstract base class for list-based queue clients."""

    @abstractmethod
    def lpush(self, name: str, *values: Any) -> Any:
        """Prepend values to the list stored at name.

        Args:
            name: List (queue) name
            *values: Serialized messages

        Returns:
            Client-specific result, the new list length for Redis
        """
        pass


def is_queue_client(client: Any) -> bool:
    """Return True if client can be used as a queue client."""
    return callable(getattr(client, "lpush", None))


def ensure_queue_client(client: Any) -> Any:
    """Validate that client implements lpush.

    Args:
        client: Candidate queue client

    Returns:
        The client, unchanged

    Raises:
        TypeError: If client has no callable lpush method
    """
    if not is_queue_client(client):
        raise TypeError(
            f"Queue client must be a redis.Redis instance or an object "
            f"implementing the 'lpush' method, got {type(client).__name__}"
        )
    return client


class NoopQueueClient(QueueClient):
    """In-memory queue client for testing.

    Keeps each list newest-first like Redis, so ``rpop`` returns messages
    in the order they were pushed.
    """

    def __init__(self) -> None:
        self.queues: dict[str, list[Any]] = {}

    def lpush(self, name: str, *values: Any) -> int:
        queue = self.queues.setdefault(name, [])
        for value in values:
            queue.insert(0, value)
        logger.debug(f"NoopQueueClient: pushed {len(values)} value(s) onto {name}")
        return len(queue)

    def rpop(self, name: str) -> Any:
        """Pop the oldest value from a list, or None if it is empty."""
        queue = self.queues.get(name)
        if not queue:
            return None
        return queue.pop()

    def llen(self, name: str) -> int:
        return len(self.queues.get(name, []))

    def get_entries(self, name: str) -> list[Any]:
        """Get the values of a list, oldest first."""
        return list(reversed(self.queues.get(name, [])))

    def clear(self) -> None:
        """Drop all stored lists (useful for testing)."""
        self.queues.clear()


def parse_server(server: str) -> dict[str, Any]:
    """Translate a server address into redis.Redis connection keywords.

    Accepts ``host:port``, a bare ``host``, ``[ipv6]:port`` or a unix
    socket path starting with ``/``. URLs are handled by
    create_redis_client directly.

    Args:
        server: Server address

    Returns:
        Either {"host": ..., "port": ...} or {"unix_socket_path": ...}

    Raises:
        ValueError: If the address is empty or the port is not a number
    """
    if not server:
        raise ValueError("Redis server address is required")

    if server.startswith("/"):
        return {"unix_socket_path": server}

    host, sep, port = server.rpartition(":")
    bracketed = host.startswith("[") and host.endswith("]")
    if not sep or (":" in host and not bracketed) or host.startswith("[") != host.endswith("]"):
        # No port given, or the colon belongs to an IPv6 address
        host, port = server, str(DEFAULT_REDIS_PORT)
    host = host.strip("[]")
    if not host:
        raise ValueError(f"Invalid Redis server address: {server!r}")

    try:
        return {"host": host, "port": int(port)}
    except ValueError as e:
        raise ValueError(f"Invalid port in Redis server address: {server!r}") from e


def build_retry(reconnect: float, every: float) -> Retry:
    """Build the redis-py retry policy for the reconnect settings.

    Args:
        reconnect: Keep retrying for up to this many seconds, 0 disables
        every: Wait this many milliseconds between attempts

    Returns:
        Retry policy

    Raises:
        ValueError: If the settings are negative, or every is 0 while
            reconnect is enabled
    """
    if reconnect < 0:
        raise ValueError(f"reconnect must be >= 0, got {reconnect}")
    if not reconnect:
        return Retry(NoBackoff(), 0)
    if every <= 0:
        raise ValueError(f"every must be > 0 when reconnect is enabled, got {every}")

    retries = max(1, int(reconnect * 1000 // every))
    return Retry(ConstantBackoff(every / 1000.0), retries)


def create_redis_client(
    server: str = "localhost:6379",
    reconnect: float = 5,
    every: float = 1,
    **kwargs: Any,
) -> redis.Redis:
    """Create the default Redis queue client.

    The connection is opened lazily by redis-py on the first command.

    Args:
        server: host:port, unix socket path or redis:// URL
        reconnect: Retry a failed command for up to this many seconds
        every: Milliseconds between reconnect attempts
        **kwargs: Passed through to redis.Redis

    Returns:
        redis.Redis instance
    """
    retry = build_retry(reconnect, every)
    options = {
        "retry": retry,
        "retry_on_error": [redis.exceptions.ConnectionError, redis.exceptions.TimeoutError],
        **kwargs,
    }

    if server.startswith(_URL_SCHEMES):
        client = redis.Redis.from_url(server, **options)
    else:
        client = redis.Redis(**parse_server(server), **options)

    logger.info(f"Created Redis queue client for {server} (reconnect={reconnect}s, every={every}ms)")
    return client


def ensure_sync_result(result: Any, owner: str) -> Any:
    """Reject the awaitable an asyncio queue client returns from lpush().

    Logging integrations call lpush() from synchronous code and cannot
    await it, so the message would never be sent.

    Args:
        result: Return value of Radis.log()
        owner: Name of the calling integration, used in the error

    Returns:
        The result, unchanged

    Raises:
        TypeError: If result is awaitable
    """
    if inspect.isawaitable(result):
        if inspect.iscoroutine(result):
            result.close()
        raise TypeError(f"{owner} requires a synchronous queue client; lpush() returned an awaitable")
    return result
