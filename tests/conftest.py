"""Shared test fixtures for the converter test suite."""

from datetime import timezone
from zoneinfo import ZoneInfo

import pytest

from core.config import ConverterConfig
from core.engine import ZonedConversionEngine
from core.exceptions import ZoneDatabaseUnavailable
from core.offset_resolver import OffsetResolver
from core.services.conversion_service import ConversionService
from core.zone_catalog import ZoneCatalog
from core.zone_database import ZoneInfoDatabase
from utils.request_context import clear_current_request_id


# =============================================================================
# FAKE ZONE DATABASES
# =============================================================================


class StaticZoneDatabase:
    """Fixed zone list; rules come from zoneinfo."""

    def __init__(self, zones):
        self._zones = list(zones)

    def zone_ids(self):
        return list(self._zones)

    def rules(self, zone):
        if zone == "UTC":
            return timezone.utc
        return ZoneInfo(zone)


class BrokenZoneDatabase:
    """Database that fails to list zones, as on a host with no tz data."""

    def zone_ids(self):
        raise ZoneDatabaseUnavailable("no tz data on this host")

    def rules(self, zone):
        raise ZoneDatabaseUnavailable(f"no rules for {zone}")


# =============================================================================
# CONTEXT FIXTURES
# =============================================================================


@pytest.fixture(autouse=True)
def reset_request_context():
    """Ensure clean request context before and after each test."""
    clear_current_request_id()
    yield
    clear_current_request_id()


# =============================================================================
# ENGINE FIXTURES
# =============================================================================


@pytest.fixture(scope="session")
def database() -> ZoneInfoDatabase:
    return ZoneInfoDatabase()


@pytest.fixture(scope="session")
def catalog(database) -> ZoneCatalog:
    return ZoneCatalog(database)


@pytest.fixture(scope="session")
def resolver(catalog, database) -> OffsetResolver:
    return OffsetResolver(catalog, database)


@pytest.fixture(scope="session")
def engine(resolver) -> ZonedConversionEngine:
    return ZonedConversionEngine(resolver)


@pytest.fixture
def config() -> ConverterConfig:
    return ConverterConfig()


@pytest.fixture
def service(engine, catalog, config) -> ConversionService:
    """Service whose host zone is pinned to Asia/Tokyo."""
    return ConversionService(engine, catalog, config, local_zone=lambda: "Asia/Tokyo")


@pytest.fixture
def static_database():
    """Factory for a StaticZoneDatabase over the given zones."""
    return StaticZoneDatabase


@pytest.fixture
def broken_database() -> BrokenZoneDatabase:
    return BrokenZoneDatabase()
