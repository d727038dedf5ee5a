"""Duration Timestamp

Parse and stringify duration timestamps such as ``hh:mm:ss`` and ``HhMmSs``.
"""

from duration_timestamp.domain.exceptions import (
    ParseError,
    RenderError,
    TimestampError,
    ValidationError,
)
from duration_timestamp.domain.services.formatter import stringify
from duration_timestamp.domain.services.parser import extract_from_groups, get_regex, parse
from duration_timestamp.domain.services.replacer import replace
from duration_timestamp.domain.services.youtube import (
    extract_youtube_id,
    extract_youtube_playlist_id,
    find_youtube_id,
    find_youtube_playlist_id,
    youtube_link,
)
from duration_timestamp.domain.value_objects.format import Format
from duration_timestamp.domain.value_objects.timestamp import (
    MINUTES_IN_HOUR,
    SECONDS_IN_HOUR,
    SECONDS_IN_MINUTE,
    PartialTimestamp,
    Timestamp,
    make,
)

__all__ = [
    "Format",
    "MINUTES_IN_HOUR",
    "ParseError",
    "PartialTimestamp",
    "RenderError",
    "SECONDS_IN_HOUR",
    "SECONDS_IN_MINUTE",
    "Timestamp",
    "TimestampError",
    "ValidationError",
    "extract_from_groups",
    "extract_youtube_id",
    "extract_youtube_playlist_id",
    "find_youtube_id",
    "find_youtube_playlist_id",
    "get_regex",
    "make",
    "parse",
    "replace",
    "stringify",
    "youtube_link",
]
