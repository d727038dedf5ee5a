"""Tests for timestamp formatting"""

from typing import Dict

import pytest

from duration_timestamp import Format, RenderError, Timestamp, make, stringify

ZERO_FORMATS = {
    Format.NUMERIC: "0:00",
    Format.SECONDS: "0s",
    Format.TINY: "0s",
    Format.SHORT: "00s",
    Format.MEDIUM: "0 secs",
    Format.LONG: "0 seconds",
}

FORMAT_CASES = [
    ({"total": 0}, ZERO_FORMATS),
    ({"total": 0, "seconds": 0}, ZERO_FORMATS),
    ({"total": 0, "minutes": 0}, ZERO_FORMATS),
    ({"total": 0, "hours": 0}, ZERO_FORMATS),
    (
        {"total": 1, "seconds": 1},
        {
            Format.NUMERIC: "0:01",
            Format.SECONDS: "1s",
            Format.TINY: "1s",
            Format.SHORT: "1s",
            Format.MEDIUM: "1 secs",
            Format.LONG: "1 seconds",
        },
    ),
    (
        {"total": 61, "minutes": 1, "seconds": 1},
        {
            Format.NUMERIC: "1:01",
            Format.SECONDS: "61s",
            Format.TINY: "1m1s",
            Format.SHORT: "1m 1s",
            Format.MEDIUM: "1 mins 1 secs",
            Format.LONG: "1 minutes 1 seconds",
        },
    ),
    (
        {"total": 3661, "hours": 1, "minutes": 1, "seconds": 1},
        {
            Format.NUMERIC: "1:01:01",
            Format.SECONDS: "3661s",
            Format.TINY: "1h1m1s",
            Format.SHORT: "1h 1m 1s",
            Format.MEDIUM: "1 hours 1 mins 1 secs",
            Format.LONG: "1 hours 1 minutes 1 seconds",
        },
    ),
    (
        {"total": 3723},
        {
            Format.NUMERIC: "1:02:03",
            Format.SECONDS: "3723s",
            Format.TINY: "1h2m3s",
            Format.SHORT: "1h 2m 3s",
            Format.MEDIUM: "1 hours 2 mins 3 secs",
            Format.LONG: "1 hours 2 minutes 3 seconds",
        },
    ),
    (
        {"total": 3600, "hours": 1},
        {
            Format.NUMERIC: "1:00:00",
            Format.SECONDS: "3600s",
            Format.TINY: "1h",
            Format.SHORT: "1h",
            Format.MEDIUM: "1 hours",
            Format.LONG: "1 hours",
        },
    ),
    (
        {"total": 60, "minutes": 1},
        {
            Format.NUMERIC: "1:00",
            Format.SECONDS: "60s",
            Format.TINY: "1m",
            Format.SHORT: "1m",
            Format.MEDIUM: "1 mins",
            Format.LONG: "1 minutes",
        },
    ),
    (
        {"hours": 10, "seconds": 5},
        {
            Format.NUMERIC: "10:00:05",
            Format.SECONDS: "36005s",
            Format.TINY: "10h5s",
            Format.SHORT: "10h 5s",
            Format.MEDIUM: "10 hours 5 secs",
            Format.LONG: "10 hours 5 seconds",
        },
    ),
    (
        {"minutes": 12, "seconds": 34},
        {
            Format.NUMERIC: "12:34",
            Format.SECONDS: "754s",
            Format.TINY: "12m34s",
            Format.SHORT: "12m 34s",
            Format.MEDIUM: "12 mins 34 secs",
            Format.LONG: "12 minutes 34 seconds",
        },
    ),
]


@pytest.mark.parametrize("fields,formats", FORMAT_CASES)
def test_stringify(fields: dict, formats: Dict[Format, str]) -> None:
    """Test every format against the expected text"""
    timestamp = make(**fields)
    for format, expected in formats.items():
        assert stringify(timestamp, format) == expected, format


def test_stringify_defaults_to_short() -> None:
    """Test the default format"""
    assert stringify(make(total=3723)) == "1h 2m 3s"
    assert stringify(make(total=0)) == "00s"


def test_stringify_accepts_format_values() -> None:
    """Test that a format can be given by its value"""
    timestamp = make(total=3723)
    assert stringify(timestamp, "numeric") == "1:02:03"
    assert stringify(timestamp, "LONG") == "1 hours 2 minutes 3 seconds"


def test_stringify_invalid_format_fails() -> None:
    """Test that an unknown format is a render error"""
    with pytest.raises(RenderError, match="invalid timestamp format"):
        stringify(make(total=1), "fortnights")


def test_stringify_inconsistent_timestamp_fails() -> None:
    """Test that the timestamp is checked again when rendering"""
    with pytest.raises(RenderError, match="did not match the sum"):
        stringify(Timestamp(total=5, seconds=3))


def test_stringify_non_timestamp_fails() -> None:
    """Test that only timestamps can be rendered"""
    with pytest.raises(RenderError):
        stringify(None)  # type: ignore[arg-type]
