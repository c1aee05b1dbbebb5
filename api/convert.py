"""POST /api/convert: convert a wall-clock time between zones."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

from api.base import success_response
from core.formatting import (
    format_copy,
    format_display,
    format_heading,
    format_iso,
    format_offset_minutes,
)
from core.models import (
    CivilTime,
    Conversion,
    ConversionRequest,
    Disambiguation,
    ZonedMoment,
)
from core.services.conversion_service import ConversionService


class ConvertBody(BaseModel):
    """Form state as posted by the client."""

    civil: str = Field(..., description="Wall-clock time, YYYY-MM-DDTHH:MM[:SS]")
    source_zone: str = Field(..., min_length=1)
    target_zone: str = Field(..., min_length=1)
    disambiguation: Disambiguation = Disambiguation.EARLIER

    def to_request(self) -> ConversionRequest:
        return ConversionRequest(
            civil=CivilTime.parse(self.civil),
            source_zone=self.source_zone,
            target_zone=self.target_zone,
            disambiguation=self.disambiguation,
        )


def moment_payload(moment: ZonedMoment) -> dict:
    """Everything the client renders or copies for one zoned reading."""
    return {
        "zone": moment.zone,
        "civil": moment.civil.isoformat(),
        "instant": moment.instant.isoformat(),
        "epoch_ms": moment.instant.epoch_ms,
        "offset_minutes": moment.offset_minutes,
        "offset": format_offset_minutes(moment.offset_minutes),
        "iso": format_iso(moment),
        "display": format_display(moment),
        "heading": format_heading(moment),
        "formatted": format_copy(moment),
    }


def conversion_payload(conversion: Conversion) -> dict:
    adjustment = None
    if conversion.adjustment is not None:
        adjustment = {
            "requested": conversion.adjustment.requested.isoformat(),
            "adjusted": conversion.adjustment.adjusted.isoformat(),
            "shift_minutes": conversion.adjustment.shift_minutes,
        }
    return {
        "source": moment_payload(conversion.source),
        "target": moment_payload(conversion.target),
        "adjustment": adjustment,
    }


def request_payload(request: ConversionRequest) -> dict:
    return {
        "civil": request.civil.isoformat(),
        "source_zone": request.source_zone,
        "target_zone": request.target_zone,
        "disambiguation": request.disambiguation.value,
    }


def create_convert_router(service: ConversionService) -> APIRouter:
    router = APIRouter()

    @router.get("/convert/defaults")
    async def defaults():
        return success_response(request_payload(service.defaults())).model_dump(mode="json")

    @router.post("/convert")
    async def convert(body: ConvertBody):
        conversion = service.convert_request(body.to_request())
        return success_response(conversion_payload(conversion)).model_dump(mode="json")

    @router.post("/convert/swap")
    async def swap(body: ConvertBody):
        swapped = service.swap(body.to_request())
        return success_response(request_payload(swapped)).model_dump(mode="json")

    return router
