"""Core value types."""

from core.models.instant import Instant, MS_PER_MINUTE, MS_PER_DAY
from core.models.civil_time import CivilTime
from core.models.moment import (
    Disambiguation,
    NonExistentLocalTimeAdjusted,
    ResolvedInstant,
    ZonedMoment,
)
from core.models.conversion import Conversion, ConversionRequest

__all__ = [
    # Instant
    "Instant", "MS_PER_MINUTE", "MS_PER_DAY",
    # CivilTime
    "CivilTime",
    # Resolution / projection results
    "Disambiguation", "NonExistentLocalTimeAdjusted", "ResolvedInstant", "ZonedMoment",
    # Conversion
    "Conversion", "ConversionRequest",
]
