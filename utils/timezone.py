"""Clock and host time zone lookups. The only places that read the environment's time."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfoNotFoundError

from tzlocal import get_localzone_name


def now_utc() -> datetime:
    """
    Current time in UTC.

    Use this instead of datetime.now() everywhere.
    """
    return datetime.now(timezone.utc)


def local_zone_name() -> str | None:
    """
    IANA name of the host's configured time zone (e.g., "America/Toronto").

    Returns None when the host zone cannot be determined; callers pick
    their own default.
    """
    try:
        return get_localzone_name()
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None
