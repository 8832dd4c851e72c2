from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

# Seattle time until timezone becomes a per-scheduler setting.
LOCAL_TIME_ZONE = ZoneInfo("America/Los_Angeles")


def local_yesterday(now: datetime, timezone: ZoneInfo = LOCAL_TIME_ZONE) -> date:
    """
    Return the calendar day before ``now`` as observed in ``timezone``.

    The subtraction happens on the local date, not the instant, so DST
    transitions never shift the result by a day.

    Args:
        now: Timezone-aware current instant
        timezone: Zone the calendar date is read in

    Returns:
        Yesterday's local date
    """
    if now.tzinfo is None:
        raise ValueError("now must be timezone-aware")
    return now.astimezone(timezone).date() - timedelta(days=1)
