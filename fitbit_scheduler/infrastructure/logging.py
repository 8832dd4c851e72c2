"""
Logging for the FitBit scheduler.

Every line is one JSON object on stdout so CloudWatch Logs can index it.
Per-invocation fields (the scheduler name) are bound with
``structlog.contextvars`` by the entry point.
"""

import logging
import sys

import structlog


def configure_logging(service_name: str, level: str = "INFO") -> None:
    """
    Configure structured JSON logging.

    Args:
        service_name: Value of the ``service`` field on every line
        level: Minimum stdlib level name, e.g. ``"DEBUG"``
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=logging.getLevelName(level.upper()),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            add_service_name(service_name),
            # Errors propagate to the Lambda runtime; keep the traceback in the JSON line
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def add_service_name(service_name: str):
    """Build a processor that stamps ``service`` unless a call already set it."""

    def processor(logger, method_name, event_dict):
        event_dict.setdefault("service", service_name)
        return event_dict

    return processor
