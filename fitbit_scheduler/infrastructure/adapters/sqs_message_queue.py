import boto3
import structlog
from botocore.exceptions import BotoCoreError, ClientError

from ...config import Settings
from ...domain import PublishError
from ...domain.ports import MessageQueue

logger = structlog.get_logger()


class SqsMessageQueue(MessageQueue):
    """SQS adapter implementing MessageQueue port."""

    def __init__(self, client) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: Settings) -> "SqsMessageQueue":
        return cls(boto3.client("sqs", **settings.client_kwargs))

    def publish(self, destination: str, body: str) -> str:
        """Send one message to an SQS queue URL."""
        try:
            response = self._client.send_message(QueueUrl=destination, MessageBody=body)
        except ClientError as e:
            error_code = e.response.get("Error", {}).get("Code", "")
            logger.error(
                "Failed to send SQS message",
                sqs_queue_url=destination,
                error_code=error_code,
                error=str(e),
            )
            raise PublishError(f"SQS rejected message for {destination}: {error_code}") from e
        except BotoCoreError as e:
            logger.error(
                "Failed to send SQS message",
                sqs_queue_url=destination,
                error=str(e),
            )
            raise PublishError(f"Could not reach SQS for {destination}") from e

        return response["MessageId"]
