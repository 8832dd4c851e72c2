"""In-memory adapters for local runs and tests."""

from dataclasses import dataclass
from uuid import uuid4

from ...domain.ports import ConfigStore, MessageQueue, SchedulerConfig


class InMemoryConfigStore(ConfigStore):
    """Dict-backed ConfigStore."""

    def __init__(self, configs: list[SchedulerConfig] | None = None) -> None:
        self._configs: dict[str, SchedulerConfig] = {}
        for config in configs or []:
            self.put(config)

    def put(self, config: SchedulerConfig) -> None:
        self._configs[config.scheduler_name] = config

    def get_config(self, scheduler_name: str) -> SchedulerConfig | None:
        return self._configs.get(scheduler_name)


@dataclass
class SentMessage:
    destination: str
    body: str
    message_id: str


class InMemoryMessageQueue(MessageQueue):
    """
    MessageQueue that records every publish.

    Set ``error`` to make the next publishes fail with it.
    """

    def __init__(self) -> None:
        self.sent: list[SentMessage] = []
        self.error: Exception | None = None

    def publish(self, destination: str, body: str) -> str:
        if self.error is not None:
            raise self.error
        message_id = str(uuid4())
        self.sent.append(SentMessage(destination, body, message_id))
        return message_id
