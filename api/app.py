"""FastAPI application factory."""

import logging

from fastapi import FastAPI

from api.convert import create_convert_router
from api.errors import register_error_handlers
from api.middleware import RequestIDMiddleware
from api.zones import create_zones_router
from core.config import ConverterConfig, load_config
from core.services.conversion_service import create_conversion_service
from core.zone_database import ZoneDatabase

logger = logging.getLogger(__name__)


def create_app(
    config: ConverterConfig | None = None,
    database: ZoneDatabase | None = None,
) -> FastAPI:
    """
    Build the converter API.

    The zone database is read once here; every request shares the same
    read-only catalog and engine.
    """
    config = config or load_config()
    service = create_conversion_service(config, database)
    if service.catalog.is_fallback:
        logger.warning("Serving with the fallback zone catalog")

    app = FastAPI(title="Time Zone Converter")
    app.add_middleware(RequestIDMiddleware)
    register_error_handlers(app)

    app.include_router(create_zones_router(service), prefix="/api")
    app.include_router(create_convert_router(service), prefix="/api")

    app.state.conversion_service = service
    return app
