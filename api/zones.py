"""GET /api/zones: zone search and offset labels."""

from fastapi import APIRouter, Query

from api.base import success_response
from core.formatting import format_offset_minutes
from core.models import Instant
from core.services.conversion_service import ConversionService


def create_zones_router(service: ConversionService) -> APIRouter:
    router = APIRouter()

    @router.get("/zones")
    async def list_zones(q: str = Query("", max_length=100)):
        return success_response(list(service.search_zones(q))).model_dump(mode="json")

    @router.get("/zones/offset")
    async def zone_offset(
        zone: str = Query(..., min_length=1),
        at: str | None = Query(None, description="ISO 8601 instant with offset; default now"),
    ):
        moment = service.moment_at(zone, Instant.parse(at) if at else None)
        return success_response({
            "zone": moment.zone,
            "at": moment.instant.isoformat(),
            "offset_minutes": moment.offset_minutes,
            "label": format_offset_minutes(moment.offset_minutes),
        }).model_dump(mode="json")

    return router
