"""Typed exceptions for zone resolution and conversion failures."""


class ConversionError(Exception):
    """Base class for time zone conversion errors."""


class UnknownZoneError(ConversionError):
    """Zone identifier is not present in the zone catalog."""

    def __init__(self, zone: str):
        self.zone = zone
        super().__init__(f"Unknown time zone: {zone!r}")


class InvalidCivilTimeError(ConversionError):
    """
    Calendar components do not form a valid date/time.

    Raised before any zone resolution is attempted (Feb 30, month 13,
    hour 24, unparsable input text).
    """


class ZoneDatabaseUnavailable(ConversionError):
    """
    The zone rule database could not be loaded.

    The catalog degrades to a fixed list instead of raising this; the
    resolver raises it when rules for a listed zone cannot be read.
    """
