from typing import List

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    messages: List[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
