"""Results of resolving and projecting civil times through a zone."""

from enum import Enum

from pydantic import BaseModel, Field

from core.models.civil_time import CivilTime
from core.models.instant import Instant


class Disambiguation(str, Enum):
    """Which occurrence to pick when a civil time happens twice (fall-back)."""

    EARLIER = "earlier"
    LATER = "later"


class NonExistentLocalTimeAdjusted(BaseModel):
    """
    Soft condition: the requested civil time fell in a spring-forward gap.

    Not an error. The instant was resolved by shifting the wall clock
    forward by the gap length; callers may surface this to the user.
    """

    requested: CivilTime
    adjusted: CivilTime
    shift_minutes: int = Field(..., description="How far the wall clock was moved forward")

    model_config = {"frozen": True}


class ResolvedInstant(BaseModel):
    """Outcome of interpreting a civil time in a zone."""

    instant: Instant
    zone: str
    offset_minutes: int
    adjustment: NonExistentLocalTimeAdjusted | None = None

    model_config = {"frozen": True}

    @property
    def was_adjusted(self) -> bool:
        """Whether the input was a non-existent local time."""
        return self.adjustment is not None


class ZonedMoment(BaseModel):
    """An instant read through a zone: the wall clock and offset it shows there."""

    instant: Instant
    zone: str
    civil: CivilTime
    offset_minutes: int

    model_config = {"frozen": True}
