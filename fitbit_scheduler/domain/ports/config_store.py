"""
Outbound port for scheduler configuration lookup.

Configs live outside the process so they can be changed without a
redeploy. Implementations live in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class SchedulerConfig:
    """Configuration record for one scheduler."""

    scheduler_name: str
    sqs_queue_url: str | None = None  # None when absent or stored as null


class ConfigStore(ABC):
    """Outbound port for reading scheduler configs."""

    @abstractmethod
    def get_config(self, scheduler_name: str) -> SchedulerConfig | None:
        """
        Look up the configuration for a scheduler.

        Args:
            scheduler_name: Key of the configuration record

        Returns:
            The config, or None if no record exists
        """
        ...
