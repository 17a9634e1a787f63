# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Configuration for Radis instances."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .radis import DEFAULT_EVERY, DEFAULT_QUEUE, DEFAULT_RECONNECT, DEFAULT_SERVER

QUEUE_DRIVERS = ("noop", "redis")


@dataclass
class RadisConfig:
    """Settings used to build a Radis and its queue client.

    Attributes:
        queue: Name of the list GELF messages are pushed onto
        server: Redis server (host:port, unix socket path or redis:// URL)
        reconnect: Seconds the Redis client keeps retrying, 0 disables
        every: Milliseconds between reconnect attempts
        default_level: Level used when log() is called without one
        driver: Queue client driver, "redis" or "noop"
    """
    queue: str = DEFAULT_QUEUE
    server: str = DEFAULT_SERVER
    reconnect: int = DEFAULT_RECONNECT
    every: int = DEFAULT_EVERY
    default_level: str | None = None
    driver: str = "redis"

    def __post_init__(self) -> None:
        self.driver = self.driver.lower()
        self.validate()

    def validate(self) -> None:
        """Check the settings for consistency.

        Raises:
            ValueError: If any setting is out of range
        """
        if not self.queue:
            raise ValueError("queue name is required")
        if not self.server:
            raise ValueError("server address is required")
        if self.reconnect < 0:
            raise ValueError(f"reconnect must be >= 0, got {self.reconnect}")
        if self.every < 0 or (self.reconnect and self.every == 0):
            raise ValueError(f"every must be > 0 when reconnect is enabled, got {self.every}")
        if self.driver not in QUEUE_DRIVERS:
            raise ValueError(
                f"Unknown queue driver: {self.driver}. "
                f"Supported drivers: {', '.join(QUEUE_DRIVERS)}"
            )


def _default(value: Any, environ: Mapping[str, str], env_var: str, fallback: Any) -> Any:
    """Helper to pick an explicit value, then env var, then fallback."""
    if value is not None:
        return value
    env_value = environ.get(env_var)
    if env_value is None or env_value == "":
        return fallback
    return env_value


def _int(value: Any, env_var: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{env_var} must be an integer, got {value!r}") from e


def load_config(
    environ: Mapping[str, str] | None = None,
    *,
    queue: str | None = None,
    server: str | None = None,
    reconnect: int | None = None,
    every: int | None = None,
    default_level: str | None = None,
    driver: str | None = None,
) -> RadisConfig:
    """Load Radis settings from explicit values and environment variables.

    Explicit arguments win over environment variables, which win over the
    defaults. Recognized variables: RADIS_QUEUE, RADIS_SERVER,
    RADIS_RECONNECT, RADIS_EVERY, RADIS_DEFAULT_LEVEL and RADIS_DRIVER.

    Args:
        environ: Environment mapping, defaults to os.environ

    Returns:
        Validated RadisConfig

    Raises:
        ValueError: If a value cannot be parsed or is out of range

    Example:
        >>> config = load_config({"RADIS_SERVER": "redis:6379"}, queue="app:logs")
        >>> config.server, config.queue
        ('redis:6379', 'app:logs')
    """
    environ = os.environ if environ is None else environ

    return RadisConfig(
        queue=_default(queue, environ, "RADIS_QUEUE", DEFAULT_QUEUE),
        server=_default(server, environ, "RADIS_SERVER", DEFAULT_SERVER),
        reconnect=_int(_default(reconnect, environ, "RADIS_RECONNECT", DEFAULT_RECONNECT), "RADIS_RECONNECT"),
        every=_int(_default(every, environ, "RADIS_EVERY", DEFAULT_EVERY), "RADIS_EVERY"),
        default_level=_default(default_level, environ, "RADIS_DEFAULT_LEVEL", None),
        driver=_default(driver, environ, "RADIS_DRIVER", "redis"),
    )
