from __future__ import annotations

from typing import List

import pytest
from loguru import logger


@pytest.fixture
def log_lines() -> List[str]:
    """Plain-text messages emitted through loguru while the test runs."""
    lines: List[str] = []
    handler_id = logger.add(lambda msg: lines.append(msg.record["message"]), format="{message}", level="DEBUG")
    yield lines
    logger.remove(handler_id)
