from .config_store import ConfigStore, SchedulerConfig
from .message_queue import MessageQueue

__all__ = [
    "ConfigStore",
    "MessageQueue",
    "SchedulerConfig",
]
