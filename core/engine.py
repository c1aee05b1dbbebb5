"""
Zoned conversion engine.

Turns a civil time read in one zone into an Instant, and reads an Instant
back as the civil time of any zone. Interpretation is where DST bites:
near a transition the offset to subtract depends on the instant being
computed, so the offset is resolved in two passes and then checked.

Policy at transitions:
    - fall-back overlap (wall time happens twice): the earlier occurrence
      unless Disambiguation.LATER is requested;
    - spring-forward gap (wall time never happens): resolved with the
      pre-transition offset, which lands after the transition and moves
      the wall clock forward by the gap length. The result carries a
      NonExistentLocalTimeAdjusted condition.

Projection is never ambiguous.
"""

from core.exceptions import InvalidCivilTimeError
from core.models import (
    CivilTime,
    Disambiguation,
    Instant,
    MS_PER_DAY,
    MS_PER_MINUTE,
    NonExistentLocalTimeAdjusted,
    ResolvedInstant,
    ZonedMoment,
)
from core.offset_resolver import OffsetResolver


class ZonedConversionEngine:
    """Civil time <-> Instant through named zones."""

    def __init__(self, resolver: OffsetResolver):
        self._resolver = resolver

    @property
    def resolver(self) -> OffsetResolver:
        return self._resolver

    def to_instant(
        self,
        civil: CivilTime,
        zone: str,
        disambiguation: Disambiguation = Disambiguation.EARLIER,
    ) -> ResolvedInstant:
        """
        Interpret civil as wall-clock time in zone.

        Args:
            civil: Wall-clock reading (already calendar-validated)
            zone: Zone identifier, matched case-insensitively
            disambiguation: Occurrence to pick inside a fall-back overlap

        Returns:
            The resolved instant, the offset used, and the gap adjustment
            if civil does not exist in zone.

        Raises:
            UnknownZoneError: If zone is not in the catalog.
            InvalidCivilTimeError: If the result falls outside the
                supported instant range.
        """
        zone = self._resolver.canonical(zone)
        local_ms = civil.to_epoch_ms()

        provisional = self._provisional_offset(zone, local_ms)
        refined = self._refined_offset(zone, local_ms, provisional)

        # Offsets a day either side cover both sides of a nearby transition
        candidates = {
            provisional,
            refined,
            self._offset_at(zone, local_ms - MS_PER_DAY),
            self._offset_at(zone, local_ms + MS_PER_DAY),
        }
        # Larger offset first: it yields the earlier instant
        consistent = sorted(
            (offset for offset in candidates if self._is_consistent(zone, local_ms, offset)),
            reverse=True,
        )

        if not consistent:
            return self._resolve_gap(civil, zone, local_ms, min(candidates))

        if disambiguation is Disambiguation.LATER:
            offset = consistent[-1]
        else:
            offset = consistent[0]

        return ResolvedInstant(
            instant=self._instant(local_ms, offset),
            zone=zone,
            offset_minutes=offset,
        )

    def project(self, instant: Instant, zone: str) -> ZonedMoment:
        """
        Read instant as the wall clock of zone.

        Raises:
            UnknownZoneError: If zone is not in the catalog.
        """
        zone = self._resolver.canonical(zone)
        offset = self._resolver.offset_of(zone, instant)
        return ZonedMoment(
            instant=instant,
            zone=zone,
            civil=CivilTime.from_epoch_ms(instant.epoch_ms + offset * MS_PER_MINUTE),
            offset_minutes=offset,
        )

    # -------------------------------------------------------------------------
    # Two-pass offset resolution
    # -------------------------------------------------------------------------

    def _provisional_offset(self, zone: str, local_ms: int) -> int:
        """Pass 1: offset at the instant the civil time would be if it were UTC."""
        return self._offset_at(zone, local_ms)

    def _refined_offset(self, zone: str, local_ms: int, provisional: int) -> int:
        """Pass 2: offset at the instant the provisional offset points to."""
        return self._offset_at(zone, local_ms - provisional * MS_PER_MINUTE)

    def _is_consistent(self, zone: str, local_ms: int, offset: int) -> bool:
        """Whether subtracting offset gives an instant at which zone has that offset."""
        epoch_ms = local_ms - offset * MS_PER_MINUTE
        try:
            at = Instant(epoch_ms)
        except ValueError:
            return False
        return self._resolver.offset_of(zone, at) == offset

    def _offset_at(self, zone: str, epoch_ms: int) -> int:
        return self._resolver.offset_of(zone, Instant.clamped(epoch_ms))

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _resolve_gap(
        self, civil: CivilTime, zone: str, local_ms: int, offset_before: int
    ) -> ResolvedInstant:
        instant = self._instant(local_ms, offset_before)
        offset_after = self._resolver.offset_of(zone, instant)
        adjusted = CivilTime.from_epoch_ms(instant.epoch_ms + offset_after * MS_PER_MINUTE)
        return ResolvedInstant(
            instant=instant,
            zone=zone,
            offset_minutes=offset_after,
            adjustment=NonExistentLocalTimeAdjusted(
                requested=civil,
                adjusted=adjusted,
                shift_minutes=offset_after - offset_before,
            ),
        )

    @staticmethod
    def _instant(local_ms: int, offset: int) -> Instant:
        try:
            return Instant(local_ms - offset * MS_PER_MINUTE)
        except ValueError as e:
            raise InvalidCivilTimeError(
                f"Civil time is outside the supported range: {e}"
            ) from e
