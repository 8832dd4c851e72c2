from datetime import UTC, datetime

import pytest
import structlog

from fitbit_scheduler.dispatcher import Dispatcher
from fitbit_scheduler.domain.ports import SchedulerConfig
from fitbit_scheduler.infrastructure.adapters import InMemoryConfigStore, InMemoryMessageQueue

QUEUE_URL = "dummy-queue-url"
SCHEDULER_NAME = "test-scheduler"

# 2017-12-18T07:00Z is 2017-12-17T23:00-0800 in Seattle, so yesterday is 2017-12-16.
MOCK_NOW = datetime(2017, 12, 18, 7, 0, tzinfo=UTC)


@pytest.fixture
def config_store() -> InMemoryConfigStore:
    return InMemoryConfigStore(
        [SchedulerConfig(scheduler_name=SCHEDULER_NAME, sqs_queue_url=QUEUE_URL)]
    )


@pytest.fixture
def message_queue() -> InMemoryMessageQueue:
    return InMemoryMessageQueue()


@pytest.fixture
def dispatcher(config_store, message_queue) -> Dispatcher:
    return Dispatcher(
        config_store=config_store,
        message_queue=message_queue,
        clock=lambda: MOCK_NOW,
    )


@pytest.fixture(autouse=True)
def clear_log_context():
    yield
    structlog.contextvars.clear_contextvars()
