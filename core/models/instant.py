"""Instant: an absolute, zone-independent point in time."""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

MS_PER_SECOND = 1000
MS_PER_MINUTE = 60 * MS_PER_SECOND
MS_PER_DAY = 24 * 60 * MS_PER_MINUTE

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

# One day of margin at each end of the datetime range so any real-world
# offset can be applied without leaving the proleptic Gregorian calendar.
MIN_EPOCH_MS = (datetime(1, 1, 2, tzinfo=timezone.utc) - EPOCH) // _ONE_MS
MAX_EPOCH_MS = (datetime(9999, 12, 31, tzinfo=timezone.utc) - EPOCH) // _ONE_MS - 1


@dataclass(frozen=True, order=True)
class Instant:
    """
    Milliseconds since 1970-01-01T00:00:00Z.

    Immutable and totally ordered. Carries no zone; pair it with a zone
    identifier to get a wall-clock reading.
    """

    epoch_ms: int

    def __post_init__(self) -> None:
        if isinstance(self.epoch_ms, bool) or not isinstance(self.epoch_ms, int):
            raise TypeError(f"epoch_ms must be an int, got {type(self.epoch_ms).__name__}")
        if not MIN_EPOCH_MS <= self.epoch_ms <= MAX_EPOCH_MS:
            raise ValueError(f"Instant out of supported range: {self.epoch_ms}")

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Instant":
        """
        Build an Instant from a timezone-aware datetime.

        Raises ValueError if datetime is naive (no timezone).
        """
        if dt.tzinfo is None:
            raise ValueError(
                "Cannot build an Instant from a naive datetime. Datetime must be timezone-aware."
            )
        return cls((dt - EPOCH) // _ONE_MS)

    @classmethod
    def parse(cls, iso_string: str) -> "Instant":
        """
        Parse an ISO 8601 string carrying an offset ('Z' or '+05:30').

        Raises ValueError if the string is malformed or has no offset.
        """
        dt = datetime.fromisoformat(iso_string)
        if dt.tzinfo is None:
            raise ValueError(
                "Cannot parse naive datetime string. "
                "Include timezone offset (e.g., 'Z' or '+00:00')."
            )
        return cls.from_datetime(dt)

    @classmethod
    def clamped(cls, epoch_ms: int) -> "Instant":
        """Nearest supported Instant to epoch_ms."""
        return cls(min(max(epoch_ms, MIN_EPOCH_MS), MAX_EPOCH_MS))

    def to_datetime(self) -> datetime:
        """This instant as a UTC datetime."""
        return EPOCH + timedelta(milliseconds=self.epoch_ms)

    def isoformat(self) -> str:
        """ISO 8601 in UTC with a 'Z' suffix; milliseconds only when non-zero."""
        dt = self.to_datetime()
        text = (
            f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d}"
            f"T{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
        )
        if dt.microsecond:
            text += f".{dt.microsecond // 1000:03d}"
        return text + "Z"

    def __str__(self) -> str:
        return self.isoformat()
