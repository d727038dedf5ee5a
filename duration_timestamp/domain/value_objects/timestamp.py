"""Timestamp value object"""

from dataclasses import dataclass
from typing import Dict, Optional, Union

from duration_timestamp.domain.exceptions import ValidationError

SECONDS_IN_MINUTE = 60
MINUTES_IN_HOUR = 60
SECONDS_IN_HOUR = SECONDS_IN_MINUTE * MINUTES_IN_HOUR

UnitValue = Optional[Union[int, str]]


@dataclass(frozen=True)
class PartialTimestamp:
    """Sparse timestamp input, a missing unit was not mentioned in the source"""

    total: Optional[int] = None
    hours: Optional[int] = None
    minutes: Optional[int] = None
    seconds: Optional[int] = None

    @classmethod
    def coerce(
        cls,
        total: UnitValue = None,
        hours: UnitValue = None,
        minutes: UnitValue = None,
        seconds: UnitValue = None,
    ) -> "PartialTimestamp":
        """Create a partial timestamp from numbers or numeric strings"""
        return cls(
            total=_to_int("total", total),
            hours=_to_int("hours", hours),
            minutes=_to_int("minutes", minutes),
            seconds=_to_int("seconds", seconds),
        )

    @property
    def has_units(self) -> bool:
        """Check if any of hours, minutes or seconds was supplied"""
        return self.hours is not None or self.minutes is not None or self.seconds is not None


@dataclass(frozen=True)
class Timestamp:
    """Normalized duration with every unit present"""

    total: int
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    @classmethod
    def from_partial(cls, partial: PartialTimestamp) -> "Timestamp":
        """Normalize a partial timestamp.

        A truthy ``total`` is authoritative: it is decomposed when no unit was
        given, and checked against the unit sum when any unit was given.
        Without a total the units are carried upwards (seconds into minutes,
        minutes into hours) and the total is computed from them.
        """
        if partial.total:
            if not partial.has_units:
                hours, remainder = divmod(partial.total, SECONDS_IN_HOUR)
                minutes, seconds = divmod(remainder, SECONDS_IN_MINUTE)
                return cls(partial.total, hours, minutes, seconds)

            timestamp = cls(
                partial.total,
                partial.hours or 0,
                partial.minutes or 0,
                partial.seconds or 0,
            )
            if not timestamp.is_consistent():
                raise ValidationError(
                    f"timestamp total did not match the sum: "
                    f"{timestamp.total} != {timestamp.unit_sum}"
                )
            return timestamp

        hours = partial.hours or 0
        minutes = partial.minutes or 0
        seconds = partial.seconds or 0
        if seconds >= SECONDS_IN_MINUTE:
            carry, seconds = divmod(seconds, SECONDS_IN_MINUTE)
            minutes += carry
        if minutes >= MINUTES_IN_HOUR:
            carry, minutes = divmod(minutes, MINUTES_IN_HOUR)
            hours += carry

        total = hours * SECONDS_IN_HOUR + minutes * SECONDS_IN_MINUTE + seconds
        return cls(total, hours, minutes, seconds)

    @property
    def unit_sum(self) -> int:
        """Get the number of seconds described by the units"""
        return self.hours * SECONDS_IN_HOUR + self.minutes * SECONDS_IN_MINUTE + self.seconds

    def is_consistent(self) -> bool:
        """Check that the total agrees with the units"""
        return self.total == self.unit_sum

    def is_zero(self) -> bool:
        """Check if the timestamp is empty"""
        return self.total == 0 and self.unit_sum == 0

    def to_dict(self) -> Dict[str, int]:
        """Dictionary representation"""
        return {
            "hours": self.hours,
            "minutes": self.minutes,
            "seconds": self.seconds,
            "total": self.total,
        }


def _to_int(name: str, value: UnitValue) -> Optional[int]:
    if value is None or value == "":
        return None
    if isinstance(value, float) and not value.is_integer():
        raise ValidationError(f"timestamp {name} is not a whole number: {value!r}")
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"timestamp {name} is not a whole number: {value!r}")
    if number < 0:
        raise ValidationError(f"timestamp {name} cannot be negative: {number}")
    return number


def make(
    partial: Optional[PartialTimestamp] = None,
    *,
    total: UnitValue = None,
    hours: UnitValue = None,
    minutes: UnitValue = None,
    seconds: UnitValue = None,
) -> Timestamp:
    """Make a normalized timestamp from a partial one or from keyword units"""
    if partial is None:
        partial = PartialTimestamp.coerce(total, hours, minutes, seconds)
    else:
        partial = PartialTimestamp.coerce(
            partial.total, partial.hours, partial.minutes, partial.seconds
        )
    return Timestamp.from_partial(partial)
