import time
from collections.abc import Callable
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

import structlog

from .domain import (
    LOCAL_TIME_ZONE,
    ConfigNotFoundError,
    DispatchRequest,
    InvalidConfigError,
    local_yesterday,
)
from .domain.ports import ConfigStore, MessageQueue

logger = structlog.get_logger()


def utc_now() -> datetime:
    return datetime.now(UTC)


class Dispatcher:
    """Sends the FitBit worker request for a scheduler.

    Sends exactly one request per call. How often it runs is decided by
    whatever invokes it (an EventBridge rule in production).
    """

    def __init__(
        self,
        config_store: ConfigStore,
        message_queue: MessageQueue,
        timezone: ZoneInfo = LOCAL_TIME_ZONE,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._config_store = config_store
        self._message_queue = message_queue
        self._timezone = timezone
        self._clock = clock

    def dispatch(self, scheduler_name: str) -> str:
        """
        Publish yesterday's request to the scheduler's queue.

        Args:
            scheduler_name: Name of the scheduler config to use

        Returns:
            Message ID assigned by the queue

        Raises:
            ConfigNotFoundError: If no config exists for the scheduler
            InvalidConfigError: If the config has no queue URL
            PublishError: If the queue rejects the message
        """
        if not scheduler_name:
            raise ValueError("scheduler_name must be non-empty")

        config = self._config_store.get_config(scheduler_name)
        if config is None:
            raise ConfigNotFoundError(f"No configuration for scheduler {scheduler_name}")

        sqs_queue_url = config.sqs_queue_url
        if not sqs_queue_url:
            raise InvalidConfigError(f"sqsQueueUrl not configured for scheduler {scheduler_name}")

        # The only request parameter is yesterday's date
        request = DispatchRequest.for_date(local_yesterday(self._clock(), self._timezone))
        request_json = request.to_json()

        logger.info(
            "Sending request",
            sqs_queue_url=sqs_queue_url,
            request_json=request_json,
        )
        started = time.perf_counter()
        message_id = self._message_queue.publish(sqs_queue_url, request_json)

        logger.info(
            "Request sent",
            message_id=message_id,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return message_id
