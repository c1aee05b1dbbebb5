"""
Conversion service: the presentation layer's entry point.

Wraps the engine with what the converter form needs: converting the
current form state, swapping zones, searching the catalog and building
the initial state (local zone, now, UTC).
"""

import logging
from typing import Callable

from core.config import ConverterConfig
from core.engine import ZonedConversionEngine
from core.models import (
    CivilTime,
    Conversion,
    ConversionRequest,
    Disambiguation,
    Instant,
    ZonedMoment,
)
from core.offset_resolver import OffsetResolver
from core.zone_catalog import ZoneCatalog
from core.zone_database import ZoneDatabase, ZoneInfoDatabase
from utils.timezone import local_zone_name, now_utc

logger = logging.getLogger(__name__)


class ConversionService:
    """Service for converting wall-clock times between zones."""

    def __init__(
        self,
        engine: ZonedConversionEngine,
        catalog: ZoneCatalog,
        config: ConverterConfig,
        local_zone: Callable[[], str | None] = local_zone_name,
    ):
        self.engine = engine
        self.catalog = catalog
        self.config = config
        self._local_zone = local_zone

    def convert(
        self,
        civil: CivilTime,
        source_zone: str,
        target_zone: str,
        disambiguation: Disambiguation = Disambiguation.EARLIER,
    ) -> Conversion:
        """
        Convert a wall-clock time in source_zone to target_zone.

        Args:
            civil: Wall-clock reading in the source zone
            source_zone: Zone the reading was taken in
            target_zone: Zone to show it in
            disambiguation: Occurrence to use inside a fall-back overlap

        Returns:
            Both zoned readings of the resolved instant

        Raises:
            UnknownZoneError: If either zone is not in the catalog
        """
        # Check the target up front so a bad target fails before any work
        target_zone = self.catalog.canonical(target_zone)

        resolved = self.engine.to_instant(civil, source_zone, disambiguation)
        if resolved.adjustment is not None:
            logger.debug(
                f"Shifted non-existent {civil} in {resolved.zone} "
                f"to {resolved.adjustment.adjusted}"
            )

        return Conversion(
            source=self.engine.project(resolved.instant, resolved.zone),
            target=self.engine.project(resolved.instant, target_zone),
            adjustment=resolved.adjustment,
        )

    def convert_request(self, request: ConversionRequest) -> Conversion:
        """Convert the form state held in request."""
        return self.convert(
            request.civil,
            request.source_zone,
            request.target_zone,
            request.disambiguation,
        )

    def convert_text(
        self,
        text: str,
        source_zone: str,
        target_zone: str,
        disambiguation: Disambiguation = Disambiguation.EARLIER,
    ) -> Conversion:
        """
        Convert a 'YYYY-MM-DDTHH:MM[:SS]' string as typed into the form.

        Raises:
            InvalidCivilTimeError: If text is not a valid civil time
            UnknownZoneError: If either zone is not in the catalog
        """
        return self.convert(CivilTime.parse(text), source_zone, target_zone, disambiguation)

    def swap(self, request: ConversionRequest) -> ConversionRequest:
        """Exchange source and target zones, keeping the wall-clock reading."""
        return request.model_copy(
            update={
                "source_zone": request.target_zone,
                "target_zone": request.source_zone,
            }
        )

    def defaults(self, now: Instant | None = None) -> ConversionRequest:
        """
        Initial form state.

        Source zone is the host zone when detection is enabled and the
        catalog knows it, else the configured default. The civil time is
        now in that zone, truncated to the minute.
        """
        source_zone = self.default_source_zone()
        target_zone = self.catalog.canonical(self.config.default_target_zone)
        if now is None:
            now = Instant.from_datetime(now_utc())

        civil = self.engine.project(now, source_zone).civil.truncated_to_minute()
        return ConversionRequest(
            civil=civil,
            source_zone=source_zone,
            target_zone=target_zone,
        )

    def default_source_zone(self) -> str:
        """
        Zone the form starts in.

        Raises:
            UnknownZoneError: If the configured default is not in the catalog
        """
        if self.config.detect_local_zone:
            local = self._local_zone()
            if local and local in self.catalog:
                return self.catalog.canonical(local)
            logger.debug(f"Local zone {local!r} not usable, using configured default")
        return self.catalog.canonical(self.config.default_source_zone)

    def search_zones(self, query: str) -> tuple[str, ...]:
        """Catalog filter, capped at config.max_search_results when set."""
        zones = self.catalog.filter(query)
        if self.config.max_search_results:
            return zones[: self.config.max_search_results]
        return zones

    def moment_at(self, zone: str, at: Instant | None = None) -> ZonedMoment:
        """
        Reading of zone at the given instant (default now).

        Raises:
            UnknownZoneError: If zone is not in the catalog
        """
        if at is None:
            at = Instant.from_datetime(now_utc())
        return self.engine.project(at, zone)


def create_conversion_service(
    config: ConverterConfig | None = None,
    database: ZoneDatabase | None = None,
) -> ConversionService:
    """
    Wire catalog, resolver, engine and service over one zone database.

    The database is read once here and shared for the service's lifetime.
    """
    config = config or ConverterConfig()
    database = database or ZoneInfoDatabase()
    catalog = ZoneCatalog(database)
    engine = ZonedConversionEngine(OffsetResolver(catalog, database))
    return ConversionService(engine, catalog, config)
