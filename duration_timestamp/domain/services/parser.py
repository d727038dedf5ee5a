"""Timestamp parsing"""

import re
from typing import Mapping, Optional

from duration_timestamp.domain.exceptions import ParseError
from duration_timestamp.domain.value_objects.timestamp import PartialTimestamp, Timestamp

# Finds a timestamp in text, either 00:00[:00] or a run of 1h 2m 3s style bits
TIMESTAMPS_REGEX = re.compile(
    r"(?:"
    r"(?:(?P<hours>\d{1,2}):)?(?P<minutes>\d{1,2}):(?P<seconds>\d{1,2})"
    r"|"
    r"(?P<bits>(?:\d{1,2}(?:[hms]| ?(?:hour|min(?:ute)?|sec(?:ond)?)s?) ?)+)"
    r")"
)

# Splits a bits run into its units, each at most once and in h, m, s order
BITS_REGEX = re.compile(
    r"^"
    r"(?:(?P<hours>\d{1,2})(?:h|\s?hours?)\s?)?"
    r"(?:(?P<minutes>\d{1,2})(?:m|\s?min(?:ute)?s?)\s?)?"
    r"(?:(?P<seconds>\d{1,2})(?:s|\s?sec(?:ond)?s?)\s?)?"
    r"$"
)


def get_regex(prefix: str = "", suffix: str = "", flags: int = 0) -> re.Pattern[str]:
    """Get the timestamp regex, optionally wrapped in a prefix and suffix.

    Without options the canonical compiled regex is returned, so it can be
    shared. Otherwise ``prefix + TIMESTAMPS_REGEX.pattern + suffix`` is
    compiled with ``flags``, e.g. ``get_regex(suffix=" [-—]")`` only finds
    timestamps followed by a dash.
    """
    if not prefix and not suffix and not flags:
        return TIMESTAMPS_REGEX
    return re.compile(prefix + TIMESTAMPS_REGEX.pattern + suffix, flags)


def extract_from_groups(groups: Optional[Mapping[str, Optional[str]]]) -> Timestamp:
    """Build a timestamp from the named groups of a timestamp regex match"""
    if not groups:
        raise ParseError("no capture groups were found for a timestamp")

    # 1h2m3s format
    bits = groups.get("bits")
    if bits:
        match = BITS_REGEX.match(bits.lower())
        if match is None:
            raise ParseError(f"no bits capture group could be decomposed from {bits!r}")
        return _make(match.groupdict())

    # 00:00:00 format
    if groups.get("minutes") is None and groups.get("seconds") is None:
        raise ParseError("no capture groups were found for a timestamp")
    return _make(groups)


def parse(text: str, prefix: str = "", suffix: str = "", flags: int = 0) -> Timestamp:
    """Extract the first timestamp within text"""
    match = get_regex(prefix, suffix, flags).search(text)
    if match is None:
        raise ParseError(f"no capture groups were found for a timestamp in {text!r}")
    return extract_from_groups(match.groupdict())


def _make(groups: Mapping[str, Optional[str]]) -> Timestamp:
    partial = PartialTimestamp.coerce(
        hours=groups.get("hours") or 0,
        minutes=groups.get("minutes") or 0,
        seconds=groups.get("seconds") or 0,
    )
    return Timestamp.from_partial(partial)
