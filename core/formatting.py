"""Display strings for offsets and zoned moments."""

from core.models import Instant, ZonedMoment
from core.offset_resolver import OffsetResolver

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAY_NAMES = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
)


def format_offset_minutes(offset_minutes: int) -> str:
    """
    'UTC±HH:MM' for an offset in minutes.

    Zero is '+'. Half-hour and 45-minute offsets keep their minutes
    (330 -> 'UTC+05:30', 765 -> 'UTC+12:45', -570 -> 'UTC-09:30').
    """
    sign = "+" if offset_minutes >= 0 else "-"
    hours, minutes = divmod(abs(offset_minutes), 60)
    return f"UTC{sign}{hours:02d}:{minutes:02d}"


def format_offset(resolver: OffsetResolver, zone: str, at: Instant) -> str:
    """
    'UTC±HH:MM' label for zone at the given instant.

    Raises:
        UnknownZoneError: If zone is not in the catalog.
    """
    return format_offset_minutes(resolver.offset_of(zone, at))


def format_iso(moment: ZonedMoment) -> str:
    """ISO 8601 with numeric offset and no milliseconds, e.g. '2024-07-01T21:30:00+05:30'."""
    # Drop the 'UTC' prefix of the label
    return moment.civil.isoformat() + format_offset_minutes(moment.offset_minutes)[3:]


def format_display(moment: ZonedMoment) -> str:
    """Long form, e.g. 'July 1, 2024, 9:30:00 PM UTC+05:30 (Asia/Kolkata)'."""
    civil = moment.civil
    hour_12 = civil.hour % 12 or 12
    meridiem = "AM" if civil.hour < 12 else "PM"
    return (
        f"{_MONTH_NAMES[civil.month - 1]} {civil.day}, {civil.year}, "
        f"{hour_12}:{civil.minute:02d}:{civil.second:02d} {meridiem} "
        f"{format_offset_minutes(moment.offset_minutes)} ({moment.zone})"
    )


def _long_date(moment: ZonedMoment) -> str:
    civil = moment.civil
    weekday = _WEEKDAY_NAMES[civil.to_datetime().weekday()]
    return f"{weekday}, {civil.day} {_MONTH_NAMES[civil.month - 1]} {civil.year}"


def format_heading(moment: ZonedMoment) -> str:
    """Result card heading, e.g. 'Monday, 1 July 2024 • 21:30 (UTC+05:30)'."""
    civil = moment.civil
    return (
        f"{_long_date(moment)} • {civil.hour:02d}:{civil.minute:02d} "
        f"({format_offset_minutes(moment.offset_minutes)})"
    )


def format_copy(moment: ZonedMoment) -> str:
    """Copy-formatted text, e.g. 'Monday, 1 July 2024 21:30 UTC+05:30'."""
    civil = moment.civil
    return (
        f"{_long_date(moment)} {civil.hour:02d}:{civil.minute:02d} "
        f"{format_offset_minutes(moment.offset_minutes)}"
    )
