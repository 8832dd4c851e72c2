from .dynamodb_config_store import DynamoDBConfigStore
from .in_memory import InMemoryConfigStore, InMemoryMessageQueue
from .sqs_message_queue import SqsMessageQueue

__all__ = [
    "DynamoDBConfigStore",
    "InMemoryConfigStore",
    "InMemoryMessageQueue",
    "SqsMessageQueue",
]
