"""Shared fixtures for segbar tests."""

import pytest
from loguru import logger


@pytest.fixture
def log_records():
    """Collect loguru records emitted while the test runs."""
    records: list = []
    sink_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(sink_id)
