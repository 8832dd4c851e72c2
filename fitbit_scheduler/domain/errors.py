class SchedulerError(Exception):
    """Base class for scheduler failures."""

    pass


class ConfigNotFoundError(SchedulerError):
    """Raised when no configuration exists for a scheduler name."""

    pass


class InvalidConfigError(SchedulerError):
    """Raised when a configuration has no usable SQS queue URL."""

    pass


class PublishError(SchedulerError):
    """Raised when the queue transport rejects a request."""

    pass
