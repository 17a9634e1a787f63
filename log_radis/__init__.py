# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""log-radis: GELF logging through a Redis queue.

Formats log events as GELF (Graylog Extended Log Format) messages and
pushes them onto a Redis list, from where a collector forwards them to a
Graylog server.

Example:
    >>> from log_radis import create_radis
    >>>
    >>> radis = create_radis(server="localhost:6379")
    >>> radis.log("notice", "Look at this.", request_id="abc123")
    >>>
    >>> # Ship stdlib logging records as well
    >>> import logging
    >>> from log_radis import RadisHandler
    >>> logging.getLogger("my-service").addHandler(RadisHandler(radis))
"""

__version__ = "0.1.0"

from .config import RadisConfig, load_config
from .exceptions import (
    MissingLevelError,
    MissingMessageError,
    RadisError,
    ReservedFieldWarning,
    TransportError,
)
from .factory import create_queue_client, create_radis
from .fields import normalize_fields, sanitize_field_name
from .handler import RadisHandler
from .levels import LEVELS, resolve_level
from .logger import Logger, RadisLogger
from .queue_client import NoopQueueClient, QueueClient, create_redis_client
from .radis import GELF_SPEC_VERSION, HOSTNAME, Radis

__all__ = [
    "__version__",
    # Core
    "Radis",
    "GELF_SPEC_VERSION",
    "HOSTNAME",
    "LEVELS",
    "resolve_level",
    "normalize_fields",
    "sanitize_field_name",
    # Factories and configuration
    "create_radis",
    "create_queue_client",
    "create_redis_client",
    "RadisConfig",
    "load_config",
    # Queue clients
    "QueueClient",
    "NoopQueueClient",
    # Logging integrations
    "Logger",
    "RadisLogger",
    "RadisHandler",
    # Errors
    "RadisError",
    "MissingLevelError",
    "MissingMessageError",
    "ReservedFieldWarning",
    "TransportError",
]
