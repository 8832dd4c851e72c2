from abc import ABC, abstractmethod


class MessageQueue(ABC):
    """Outbound port for fire-and-forget message publishing."""

    @abstractmethod
    def publish(self, destination: str, body: str) -> str:
        """
        Hand a message to the queue transport.

        Args:
            destination: Queue identifier (SQS queue URL)
            body: Serialized message

        Returns:
            Transport-assigned message ID

        Raises:
            PublishError: If the transport rejects the message
        """
        ...
