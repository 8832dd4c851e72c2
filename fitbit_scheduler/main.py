import argparse
import sys
from typing import Any

import structlog

from .config import Settings, settings
from .dispatcher import Dispatcher
from .infrastructure.adapters import DynamoDBConfigStore, SqsMessageQueue
from .infrastructure.logging import configure_logging

configure_logging(settings.service_name, settings.log_level)

logger = structlog.get_logger()

EVENT_KEY_SCHEDULER_NAME = "schedulerName"

# Reused across warm Lambda invocations
_dispatcher: Dispatcher | None = None


def create_dispatcher(app_settings: Settings) -> Dispatcher:
    """Wire the dispatcher to DynamoDB and SQS (Composition Root)."""
    return Dispatcher(
        config_store=DynamoDBConfigStore.from_settings(app_settings),
        message_queue=SqsMessageQueue.from_settings(app_settings),
    )


def get_dispatcher() -> Dispatcher:
    """Get or create the global dispatcher."""
    global _dispatcher
    if _dispatcher is None:
        _dispatcher = create_dispatcher(settings)
    return _dispatcher


def scheduler_name_from_event(event: Any) -> str:
    """Accept either a bare scheduler name or EventBridge constant input."""
    if isinstance(event, str):
        name = event
    elif isinstance(event, dict):
        name = event.get(EVENT_KEY_SCHEDULER_NAME)
    else:
        name = None

    if not isinstance(name, str) or not name:
        raise ValueError(f"Event must carry a non-empty {EVENT_KEY_SCHEDULER_NAME}")
    return name


def run(scheduler_name: str) -> str:
    """Dispatch once for a scheduler and return the SQS message ID."""
    # Warm Lambda containers reuse the context; drop the previous invocation's fields
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(scheduler_name=scheduler_name)
    logger.info("Dispatching scheduler request")
    return get_dispatcher().dispatch(scheduler_name)


def handler(event: Any, context) -> dict:
    """AWS Lambda handler for EventBridge scheduled events."""
    scheduler_name = scheduler_name_from_event(event)
    message_id = run(scheduler_name)
    return {
        "statusCode": 200,
        "schedulerName": scheduler_name,
        "messageId": message_id,
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fitbit-scheduler",
        description="Send yesterday's FitBitWorker request for a scheduler",
    )
    parser.add_argument("scheduler_name", help="Name of the scheduler config in DynamoDB")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Command line entry point: ``fitbit-scheduler <scheduler-name>``."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.scheduler_name:
        parser.error("scheduler_name must be non-empty")

    run(args.scheduler_name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
