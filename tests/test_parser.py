"""Tests for timestamp parsing"""

import re

import pytest

from duration_timestamp import (
    ParseError,
    Timestamp,
    TimestampError,
    extract_from_groups,
    get_regex,
    parse,
)
from duration_timestamp.domain.services.parser import TIMESTAMPS_REGEX

EXTRACT_CASES = [
    ("00:00", Timestamp(0, 0, 0, 0)),
    ("0:0", Timestamp(0, 0, 0, 0)),
    ("00:00:00", Timestamp(0, 0, 0, 0)),
    ("0:0:0", Timestamp(0, 0, 0, 0)),
    ("2:3", Timestamp(123, 0, 2, 3)),
    ("22:33", Timestamp(1353, 0, 22, 33)),
    ("1:2:3", Timestamp(3723, 1, 2, 3)),
    ("1:02:03", Timestamp(3723, 1, 2, 3)),
    ("11:22:33", Timestamp(40953, 11, 22, 33)),
    ("0s", Timestamp(0, 0, 0, 0)),
    ("0m", Timestamp(0, 0, 0, 0)),
    ("0h", Timestamp(0, 0, 0, 0)),
    ("3s", Timestamp(3, 0, 0, 3)),
    ("2m", Timestamp(120, 0, 2, 0)),
    ("1h", Timestamp(3600, 1, 0, 0)),
    ("1h 3s", Timestamp(3603, 1, 0, 3)),
    ("2m 3s", Timestamp(123, 0, 2, 3)),
    ("1h2m3s", Timestamp(3723, 1, 2, 3)),
    ("1h 2m 3s", Timestamp(3723, 1, 2, 3)),
    ("11h 22m 33s", Timestamp(40953, 11, 22, 33)),
    ("2 mins", Timestamp(120, 0, 2, 0)),
    ("1 minute 1 second", Timestamp(61, 0, 1, 1)),
    ("01 hours 02 minutes 03 secs", Timestamp(3723, 1, 2, 3)),
    ("90s", Timestamp(90, 0, 1, 30)),
    ("see 4:05 for the answer", Timestamp(245, 0, 4, 5)),
]


@pytest.mark.parametrize("text,expected", EXTRACT_CASES)
def test_parse(text: str, expected: Timestamp) -> None:
    """Test extraction of supported timestamp styles"""
    assert parse(text) == expected


def test_parse_equivalence() -> None:
    """Test that compact, spaced and colon styles agree"""
    expected = Timestamp(total=3723, hours=1, minutes=2, seconds=3)
    assert parse("1h2m3s") == parse("1h 2m 3s") == parse("1:02:03") == expected


@pytest.mark.parametrize("text", ["00", "0", "", "no timestamp here", "1x"])
def test_parse_without_timestamp_fails(text: str) -> None:
    """Test that text without a timestamp is a hard error"""
    with pytest.raises(ParseError, match="capture group"):
        parse(text)


def test_parse_bits_out_of_order_fails() -> None:
    """Test that a bits run which does not decompose is a hard error"""
    with pytest.raises(ParseError, match="bits"):
        parse("3s 2m")


def test_parse_errors_are_value_errors() -> None:
    """Test the error hierarchy"""
    with pytest.raises(ValueError):
        parse("0")
    assert issubclass(ParseError, TimestampError)


def test_get_regex_without_options_is_canonical() -> None:
    """Test that the canonical regex is shared"""
    assert get_regex() is TIMESTAMPS_REGEX


def test_get_regex_with_suffix() -> None:
    """Test embedding the timestamp regex within a larger pattern"""
    regex = get_regex(suffix=" [-—]")
    assert regex.pattern == TIMESTAMPS_REGEX.pattern + " [-—]"
    assert regex.search("1:02 intro") is None
    assert regex.search("1:02 - intro") is not None


def test_get_regex_with_prefix_and_flags() -> None:
    """Test anchoring and flags"""
    regex = get_regex(prefix="^", suffix="$", flags=re.IGNORECASE)
    assert regex.flags & re.IGNORECASE
    assert regex.match("1H 2M") is not None
    assert regex.match("at 1:02") is None


def test_parse_with_options() -> None:
    """Test that parse honours prefix and suffix"""
    assert parse("1:00 and 2:00 —", suffix=" —") == Timestamp(120, 0, 2, 0)
    assert parse("START 1H", prefix="START ", flags=re.IGNORECASE) == Timestamp(3600, 1, 0, 0)
    with pytest.raises(ParseError):
        parse("1:00", prefix="^at ")


def test_extract_from_groups() -> None:
    """Test building a timestamp from capture groups"""
    assert extract_from_groups({"minutes": "1", "seconds": "2"}) == Timestamp(62, 0, 1, 2)
    assert extract_from_groups({"bits": "1h "}) == Timestamp(3600, 1, 0, 0)
    with pytest.raises(ParseError):
        extract_from_groups(None)
    with pytest.raises(ParseError):
        extract_from_groups({"hours": None, "minutes": None, "seconds": None, "bits": None})
