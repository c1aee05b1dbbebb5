"""Zone-naive calendar date/time value."""

import re
from datetime import date, datetime, timedelta

from pydantic import BaseModel, model_validator

from core.exceptions import InvalidCivilTimeError

_NAIVE_EPOCH = datetime(1970, 1, 1)
_ONE_MS = timedelta(milliseconds=1)

_REQUIRED_COMPONENTS = ("year", "month", "day")
_COMPONENTS = _REQUIRED_COMPONENTS + ("hour", "minute", "second")

# datetime-local input form, seconds optional
_CIVIL_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[T ](\d{2}):(\d{2})(?::(\d{2}))?$"
)


class CivilTime(BaseModel):
    """
    A wall-clock reading with no UTC offset attached.

    Ambiguous on its own: pair it with a zone identifier to resolve an
    Instant. Construction fails with InvalidCivilTimeError unless the
    components form a real calendar date (leap years included).
    """

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def require_integer_components(cls, values):
        """Missing or non-integer components are invalid civil times too."""
        if not isinstance(values, dict):
            return values
        for name in _REQUIRED_COMPONENTS:
            if name not in values:
                raise InvalidCivilTimeError(f"Civil time needs a {name}")
        for name in _COMPONENTS:
            value = values.get(name, 0)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidCivilTimeError(
                    f"{name.capitalize()} must be an integer, got {value!r}"
                )
        return values

    @model_validator(mode="after")
    def require_calendar_valid(self) -> "CivilTime":
        """Reject Feb 30, month 13, hour 24 and friends."""
        try:
            date(self.year, self.month, self.day)
        except ValueError as e:
            raise InvalidCivilTimeError(
                f"Invalid date {self.year:04d}-{self.month:02d}-{self.day:02d}: {e}"
            ) from e
        if not 0 <= self.hour <= 23:
            raise InvalidCivilTimeError(f"Hour must be in 0..23, got {self.hour}")
        if not 0 <= self.minute <= 59:
            raise InvalidCivilTimeError(f"Minute must be in 0..59, got {self.minute}")
        if not 0 <= self.second <= 59:
            raise InvalidCivilTimeError(f"Second must be in 0..59, got {self.second}")
        return self

    @classmethod
    def parse(cls, text: str) -> "CivilTime":
        """
        Parse 'YYYY-MM-DDTHH:MM' or 'YYYY-MM-DDTHH:MM:SS'.

        A space is accepted in place of the 'T'. Any offset suffix is
        rejected: civil times carry none.

        Raises:
            InvalidCivilTimeError: If text is malformed or not a real date.
        """
        match = _CIVIL_PATTERN.match(text.strip())
        if match is None:
            raise InvalidCivilTimeError(
                f"Cannot parse civil time {text!r}. Expected YYYY-MM-DDTHH:MM[:SS]."
            )
        year, month, day, hour, minute, second = match.groups()
        return cls(
            year=int(year),
            month=int(month),
            day=int(day),
            hour=int(hour),
            minute=int(minute),
            second=int(second or 0),
        )

    @classmethod
    def from_datetime(cls, dt: datetime) -> "CivilTime":
        """Wall-clock fields of dt; any tzinfo and sub-second part are dropped."""
        return cls(
            year=dt.year,
            month=dt.month,
            day=dt.day,
            hour=dt.hour,
            minute=dt.minute,
            second=dt.second,
        )

    @classmethod
    def from_epoch_ms(cls, epoch_ms: int) -> "CivilTime":
        """Decompose milliseconds since the (offset-free) epoch into fields."""
        return cls.from_datetime(_NAIVE_EPOCH + timedelta(milliseconds=epoch_ms))

    def to_datetime(self) -> datetime:
        """Naive datetime with the same fields."""
        return datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def to_epoch_ms(self) -> int:
        """Milliseconds since the epoch, reading this civil time as if it were UTC."""
        return (self.to_datetime() - _NAIVE_EPOCH) // _ONE_MS

    def truncated_to_minute(self) -> "CivilTime":
        return self.model_copy(update={"second": 0})

    def isoformat(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
            f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )

    def __str__(self) -> str:
        return self.isoformat()
