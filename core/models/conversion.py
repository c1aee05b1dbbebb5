"""Presenter-facing conversion request/result models."""

from pydantic import BaseModel

from core.models.civil_time import CivilTime
from core.models.moment import Disambiguation, NonExistentLocalTimeAdjusted, ZonedMoment


class ConversionRequest(BaseModel):
    """What the form holds: a wall-clock reading and the two zones."""

    civil: CivilTime
    source_zone: str
    target_zone: str
    disambiguation: Disambiguation = Disambiguation.EARLIER

    model_config = {"frozen": True}


class Conversion(BaseModel):
    """
    The same instant read in both zones.

    source shows the wall clock actually used, which differs from the
    request when a non-existent local time was shifted (see adjustment).
    """

    source: ZonedMoment
    target: ZonedMoment
    adjustment: NonExistentLocalTimeAdjusted | None = None

    model_config = {"frozen": True}
