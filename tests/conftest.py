# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Test fixtures for log-radis."""

import json
from typing import Any

import pytest

from log_radis import NoopQueueClient, Radis

TEST_HOSTNAME = "test-host"
TEST_TIME = 1700000000.25
TEST_QUEUE = "test:queue"


@pytest.fixture
def queue_client() -> NoopQueueClient:
    """In-memory queue client."""
    return NoopQueueClient()


@pytest.fixture
def radis(queue_client: NoopQueueClient) -> Radis:
    """Radis with a fixed hostname and clock, pushing onto queue_client."""
    return Radis(
        queue=TEST_QUEUE,
        redis=queue_client,
        hostname=TEST_HOSTNAME,
        clock=lambda: TEST_TIME,
    )


@pytest.fixture
def pushed(queue_client: NoopQueueClient):
    """Return a callable giving the decoded messages pushed so far, oldest first."""

    def _pushed() -> list[dict[str, Any]]:
        return [json.loads(entry) for entry in queue_client.get_entries(TEST_QUEUE)]

    return _pushed
