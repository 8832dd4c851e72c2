from .dates import LOCAL_TIME_ZONE, local_yesterday
from .dispatch_request import SERVICE, DispatchRequest
from .errors import ConfigNotFoundError, InvalidConfigError, PublishError, SchedulerError

__all__ = [
    "ConfigNotFoundError",
    "DispatchRequest",
    "InvalidConfigError",
    "LOCAL_TIME_ZONE",
    "PublishError",
    "SERVICE",
    "SchedulerError",
    "local_yesterday",
]
