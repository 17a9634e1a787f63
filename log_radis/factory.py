# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions for creating Radis instances and queue clients."""

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .config import RadisConfig, load_config
from .queue_client import NoopQueueClient, create_redis_client
from .radis import Radis

logger = logging.getLogger(__name__)


def _build_redis(config: RadisConfig) -> Any:
    return create_redis_client(
        server=config.server,
        reconnect=config.reconnect,
        every=config.every,
    )


def _build_noop(config: RadisConfig) -> Any:
    del config
    return NoopQueueClient()


_DRIVERS: Mapping[str, Callable[[RadisConfig], Any]] = {
    "redis": _build_redis,
    "noop": _build_noop,
}


def create_queue_client(config: RadisConfig) -> Any:
    """Create the queue client selected by config.driver.

    Args:
        config: RadisConfig instance

    Returns:
        Queue client implementing lpush()

    Raises:
        ValueError: If config is missing or the driver is unknown
    """
    if config is None:
        raise ValueError("queue config is required")

    driver = str(config.driver).lower()
    try:
        factory = _DRIVERS[driver]
    except KeyError as exc:
        supported = ", ".join(sorted(_DRIVERS))
        raise ValueError(f"Unknown queue driver: {driver}. Supported drivers: {supported}") from exc
    return factory(config)


def create_radis(
    config: RadisConfig | None = None,
    redis: Any = None,
    **overrides: Any,
) -> Radis:
    """Factory function to create a Radis instance.

    Args:
        config: Settings to use. Loaded with load_config() when omitted,
            in which case overrides are passed on to it.
        redis: Queue client to use instead of the configured driver
        **overrides: Explicit settings for load_config() (queue, server, ...)

    Returns:
        Radis instance

    Raises:
        ValueError: If overrides are given together with config, or a
            setting is invalid

    Example:
        >>> radis = create_radis(driver="noop", default_level="info")
        >>> radis.log(None, "Service started")
    """
    if config is None:
        config = load_config(**overrides)
    elif overrides:
        raise ValueError("Pass either a config or explicit settings, not both")

    client = redis if redis is not None else create_queue_client(config)
    logger.debug(f"Creating Radis for queue {config.queue} using {type(client).__name__}")

    return Radis(
        queue=config.queue,
        server=config.server,
        reconnect=config.reconnect,
        every=config.every,
        redis=client,
        default_level=config.default_level,
    )
