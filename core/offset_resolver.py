"""UTC offset of a zone at an instant, DST included."""

from datetime import timedelta, tzinfo

from core.models import Instant
from core.zone_catalog import ZoneCatalog
from core.zone_database import ZoneDatabase


def whole_minutes(offset: timedelta) -> int:
    """
    Offset in whole minutes, truncated toward zero.

    Only pre-standard-time local mean time offsets carry seconds
    (Toronto LMT is -5:17:32).
    """
    seconds = int(offset.total_seconds())
    minutes = abs(seconds) // 60
    return -minutes if seconds < 0 else minutes


class OffsetResolver:
    """
    Answers "what is the UTC offset of this zone at this instant".

    Pure: the same zone and instant always give the same offset. Zones are
    checked against the catalog before their rules are read.
    """

    def __init__(self, catalog: ZoneCatalog, database: ZoneDatabase):
        self._catalog = catalog
        self._database = database

    def canonical(self, zone: str) -> str:
        """
        Catalog spelling of zone.

        Raises:
            UnknownZoneError: If zone is not in the catalog.
        """
        return self._catalog.canonical(zone)

    def rules_for(self, zone: str) -> tzinfo:
        """
        Transition rules for zone.

        Raises:
            UnknownZoneError: If zone is not in the catalog.
            ZoneDatabaseUnavailable: If the rules cannot be read.
        """
        return self._database.rules(self.canonical(zone))

    def offset_of(self, zone: str, at: Instant) -> int:
        """
        UTC offset of zone at the given instant, in minutes.

        Raises:
            UnknownZoneError: If zone is not in the catalog.
            ZoneDatabaseUnavailable: If the rules cannot be read.
        """
        rules = self.rules_for(zone)
        return whole_minutes(at.to_datetime().astimezone(rules).utcoffset())
