"""Timestamp formatting"""

from typing import List, Tuple, Union

from duration_timestamp.domain.exceptions import RenderError
from duration_timestamp.domain.value_objects.format import Format
from duration_timestamp.domain.value_objects.timestamp import Timestamp

# Unit suffixes for each unit listing format, in hours, minutes, seconds order
UNIT_LABELS = {
    Format.TINY: ("h", "m", "s"),
    Format.SHORT: ("h", "m", "s"),
    Format.MEDIUM: (" hours", " mins", " secs"),
    Format.LONG: (" hours", " minutes", " seconds"),
}

# Separator and empty rendering for each unit listing format
UNIT_LAYOUTS = {
    Format.TINY: ("", "0s"),
    Format.SHORT: (" ", "00s"),
    Format.MEDIUM: (" ", "0 secs"),
    Format.LONG: (" ", "0 seconds"),
}


def pad(value: int) -> str:
    """Pad a value for output in 00:00:00 format"""
    return f"{value:02d}"


def to_format(value: Union[Format, str]) -> Format:
    """Resolve a format member or its value"""
    if isinstance(value, Format):
        return value
    try:
        return Format(str(value).lower())
    except ValueError:
        raise RenderError(f"invalid timestamp format: {value!r}")


def stringify(timestamp: Timestamp, format: Union[Format, str] = Format.SHORT) -> str:
    """Turn a timestamp into text in the given format"""
    if not isinstance(timestamp, Timestamp):
        raise RenderError(f"cannot stringify {type(timestamp).__name__}, expected a Timestamp")
    if not timestamp.is_consistent():
        raise RenderError(
            f"timestamp total did not match the sum: {timestamp.total} != {timestamp.unit_sum}"
        )

    format = to_format(format)
    if format is Format.NUMERIC:
        if timestamp.hours:
            return f"{timestamp.hours}:{pad(timestamp.minutes)}:{pad(timestamp.seconds)}"
        return f"{timestamp.minutes}:{pad(timestamp.seconds)}"
    if format is Format.SECONDS:
        return f"{timestamp.total}s"

    separator, empty = UNIT_LAYOUTS[format]
    parts: List[str] = []
    units: Tuple[int, int, int] = (timestamp.hours, timestamp.minutes, timestamp.seconds)
    for value, label in zip(units, UNIT_LABELS[format]):
        if value:
            parts.append(f"{value}{label}")
    return separator.join(parts) or empty
