import boto3
import structlog

from ...config import Settings
from ...domain.ports import ConfigStore, SchedulerConfig

logger = structlog.get_logger()

CONFIG_KEY_SCHEDULER_NAME = "schedulerName"
CONFIG_KEY_QUEUE_URL = "sqsQueueUrl"


class DynamoDBConfigStore(ConfigStore):
    """
    DynamoDB adapter implementing ConfigStore.

    Configs are kept in DynamoDB rather than in env vars so they can be
    changed without redeploying the Lambda.
    """

    def __init__(self, table) -> None:
        """
        Args:
            table: boto3 DynamoDB Table resource keyed by schedulerName
        """
        self._table = table

    @classmethod
    def from_settings(cls, settings: Settings) -> "DynamoDBConfigStore":
        dynamodb = boto3.resource("dynamodb", **settings.client_kwargs)
        return cls(dynamodb.Table(settings.config_table_name))

    def get_config(self, scheduler_name: str) -> SchedulerConfig | None:
        """Fetch the config item for a scheduler, or None if absent."""
        response = self._table.get_item(Key={CONFIG_KEY_SCHEDULER_NAME: scheduler_name})
        item = response.get("Item")
        if item is None:
            logger.warning("Scheduler config not found", table=self._table.name)
            return None

        # A NULL attribute deserializes to None, same as a missing one
        return SchedulerConfig(
            scheduler_name=scheduler_name,
            sqs_queue_url=item.get(CONFIG_KEY_QUEUE_URL),
        )
