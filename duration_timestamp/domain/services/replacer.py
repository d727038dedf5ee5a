"""Timestamp replacement within text"""

import logging
from re import Match
from typing import Callable, Optional

from duration_timestamp.domain.exceptions import TimestampError
from duration_timestamp.domain.services.parser import extract_from_groups, get_regex
from duration_timestamp.domain.value_objects.timestamp import Timestamp

logger = logging.getLogger(__name__)

Replacer = Callable[[Timestamp, str], Optional[str]]


def replace(
    text: str,
    replacer: Replacer,
    prefix: str = "",
    suffix: str = "",
    flags: int = 0,
    count: int = 0,
) -> str:
    """Replace timestamp occurrences within text with the results of a replacer.

    The replacer receives the timestamp and the matched text. When it returns
    a string that string is used, otherwise the matched text is kept. Matches
    that do not make a valid timestamp are kept as well. ``count`` limits how
    many matches are visited, ``0`` visits all of them.

    Example, linking timestamps followed by a dash to a video::

        replace(html, lambda timestamp, match: youtube_link(timestamp, video_id), suffix=" [-—]")
    """
    regex = get_regex(prefix, suffix, flags)

    def substitute(match: Match[str]) -> str:
        original = match.group(0)
        try:
            timestamp = extract_from_groups(match.groupdict())
        except TimestampError as e:
            logger.debug(f"fallback: {original!r} ({e})")
            return original

        result = replacer(timestamp, original)
        if isinstance(result, str):
            logger.debug(f"replaced: {original!r} -> {result!r}")
            return result

        logger.debug(f"fallback: {original!r}")
        return original

    return regex.sub(substitute, text, count=count)
