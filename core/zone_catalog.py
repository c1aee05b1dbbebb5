"""
Zone catalog: the set of valid zone identifiers.

Read once from the injected ZoneDatabase at construction and never
mutated afterwards. If the database cannot be read, the catalog degrades
to FALLBACK_ZONES instead of failing every lookup.
"""

import logging

from core.exceptions import UnknownZoneError, ZoneDatabaseUnavailable
from core.zone_database import ZoneDatabase

logger = logging.getLogger(__name__)

# Well-known zones used when the environment provides no zone list.
FALLBACK_ZONES: tuple[str, ...] = (
    # Americas
    "America/Anchorage", "America/Chicago", "America/Denver", "America/Edmonton",
    "America/Halifax", "America/Los_Angeles", "America/Mexico_City", "America/New_York",
    "America/Phoenix", "America/Toronto", "America/Vancouver", "America/Winnipeg",
    "America/Bogota", "America/Sao_Paulo",
    # Europe/Africa
    "Atlantic/Reykjavik", "Europe/Dublin", "Europe/Lisbon", "Europe/London",
    "Europe/Madrid", "Europe/Paris", "Europe/Berlin", "Europe/Rome",
    "Europe/Stockholm", "Europe/Athens", "Europe/Helsinki", "Europe/Moscow",
    "Africa/Cairo", "Africa/Johannesburg",
    # Asia/Oceania
    "Asia/Dubai", "Asia/Kolkata", "Asia/Karachi", "Asia/Bangkok",
    "Asia/Singapore", "Asia/Hong_Kong", "Asia/Tokyo", "Asia/Seoul",
    "Asia/Shanghai", "Australia/Perth", "Australia/Adelaide", "Australia/Sydney",
    "Pacific/Auckland",
    "UTC",
)


class ZoneCatalog:
    """Ordered, case-insensitive catalog of zone identifiers."""

    def __init__(self, database: ZoneDatabase):
        reason = "database lists no zones"
        try:
            zones = tuple(sorted(database.zone_ids()))
        except ZoneDatabaseUnavailable as e:
            reason = str(e)
            zones = ()

        self._is_fallback = not zones
        if self._is_fallback:
            logger.warning(f"Zone database unavailable, using fallback catalog: {reason}")
            zones = FALLBACK_ZONES
        else:
            logger.info(f"Zone catalog loaded with {len(zones)} zones")

        self._zones = zones
        # Lowercased identifier -> catalog spelling
        self._by_key = {zone.lower(): zone for zone in zones}

    @property
    def is_fallback(self) -> bool:
        """Whether the catalog degraded to FALLBACK_ZONES."""
        return self._is_fallback

    def list(self) -> tuple[str, ...]:
        """All zone identifiers, in stable order."""
        return self._zones

    def filter(self, query: str) -> tuple[str, ...]:
        """
        Identifiers containing query, case-insensitively.

        Keeps the relative order of list(). Surrounding whitespace in the
        query is ignored; an empty query returns the full list.
        """
        needle = query.strip().lower()
        if not needle:
            return self._zones
        return tuple(zone for zone in self._zones if needle in zone.lower())

    def canonical(self, zone: str) -> str:
        """
        Catalog spelling of zone, matched case-insensitively.

        Raises:
            UnknownZoneError: If zone is not in the catalog.
        """
        try:
            return self._by_key[zone.strip().lower()]
        except KeyError:
            raise UnknownZoneError(zone) from None

    def __contains__(self, zone: object) -> bool:
        return isinstance(zone, str) and zone.strip().lower() in self._by_key

    def __len__(self) -> int:
        return len(self._zones)
