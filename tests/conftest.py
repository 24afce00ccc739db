import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect loguru warnings emitted while the test runs."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="WARNING"
    )
    yield messages
    logger.remove(handler_id)
