"""
Zone rule database.

Where zone identifiers and their UTC-offset rules come from. The catalog
and resolver take a ZoneDatabase through their constructors so tests can
swap in a fake or a broken one.
"""

from datetime import timezone, tzinfo
from typing import Iterable, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError, available_timezones

from core.exceptions import ZoneDatabaseUnavailable


class ZoneDatabase(Protocol):
    """Read-only source of zone identifiers and rules."""

    def zone_ids(self) -> Iterable[str]:
        """All identifiers the database knows. Raises ZoneDatabaseUnavailable."""
        ...

    def rules(self, zone: str) -> tzinfo:
        """Offset rules for one identifier. Raises ZoneDatabaseUnavailable."""
        ...


class ZoneInfoDatabase:
    """IANA tzdb through zoneinfo (system tz files, else the tzdata package)."""

    def zone_ids(self) -> set[str]:
        try:
            zones = available_timezones()
        except OSError as e:
            raise ZoneDatabaseUnavailable(f"Cannot read zone database: {e}") from e
        if not zones:
            raise ZoneDatabaseUnavailable("Zone database contains no zones")
        return zones

    def rules(self, zone: str) -> tzinfo:
        try:
            return ZoneInfo(zone)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            # UTC needs no rule file
            if zone == "UTC":
                return timezone.utc
            raise ZoneDatabaseUnavailable(f"No rules available for {zone!r}: {e}") from e
