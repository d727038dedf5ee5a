"""Timestamp use cases"""

import logging
import re
from typing import Optional, Tuple, Union

from duration_timestamp.domain.exceptions import ParseError
from duration_timestamp.domain.services.formatter import stringify, to_format
from duration_timestamp.domain.services.parser import get_regex, parse
from duration_timestamp.domain.services.replacer import replace
from duration_timestamp.domain.services.youtube import (
    PLAYER_ATTRIBUTE,
    extract_youtube_id,
    youtube_link,
)
from duration_timestamp.domain.value_objects.format import Format
from duration_timestamp.domain.value_objects.timestamp import PartialTimestamp, Timestamp, make

logger = logging.getLogger(__name__)


def _flags(prefix: str, suffix: str, ignore_case: bool) -> int:
    flags = re.IGNORECASE if ignore_case else 0
    try:
        get_regex(prefix, suffix, flags)
    except re.error as e:
        raise ParseError(f"invalid timestamp prefix or suffix: {e}")
    return flags


def _youtube_id(video: str, attribute: Optional[str] = None) -> str:
    if attribute is None:
        # a url, or the bare id a player element carries
        attribute = "href" if "://" in video else PLAYER_ATTRIBUTE
    youtube_id = extract_youtube_id(video, attribute)
    if not youtube_id:
        raise ParseError(f"no youtube video id found in {video!r}")
    return youtube_id


class ParseTimestampUseCase:
    """Use case for extracting the first timestamp from text"""

    def execute(
        self, text: str, prefix: str = "", suffix: str = "", ignore_case: bool = False
    ) -> Timestamp:
        """Parse text into a timestamp"""
        return parse(text, prefix, suffix, _flags(prefix, suffix, ignore_case))


class MakeTimestampUseCase:
    """Use case for normalizing a partial timestamp"""

    def execute(self, partial: PartialTimestamp) -> Timestamp:
        """Make a timestamp from a partial one"""
        return make(partial)


class StringifyTimestampUseCase:
    """Use case for rendering a partial timestamp"""

    def execute(self, partial: PartialTimestamp, format: Union[Format, str]) -> str:
        """Normalize then stringify a timestamp"""
        return stringify(make(partial), to_format(format))


class ReplaceTimestampsUseCase:
    """Use case for rewriting every timestamp within text"""

    def execute(
        self,
        text: str,
        format: Union[Format, str],
        prefix: str = "",
        suffix: str = "",
        ignore_case: bool = False,
        youtube_id: Optional[str] = None,
    ) -> Tuple[str, int]:
        """Replace timestamps with their rendering, or with video links when an id is given"""
        format = to_format(format)
        if youtube_id:
            youtube_id = _youtube_id(youtube_id)
        replacements = 0

        def replacer(timestamp: Timestamp, match: str) -> Optional[str]:
            nonlocal replacements
            if youtube_id:
                result = youtube_link(timestamp, youtube_id, format=format)
                if not result:
                    # empty timestamps are left as they are
                    return None
            else:
                result = stringify(timestamp, format)
            replacements += 1
            return result

        result = replace(text, replacer, prefix, suffix, _flags(prefix, suffix, ignore_case))
        logger.info(f"Replaced {replacements} timestamps")
        return result, replacements


class YoutubeLinkUseCase:
    """Use case for linking a video at a timestamp"""

    def execute(
        self,
        youtube_id: Optional[str] = None,
        url: Optional[str] = None,
        partial: Optional[PartialTimestamp] = None,
        text: Optional[str] = None,
        format: Union[Format, str] = Format.SHORT,
        prefix: str = "",
        suffix: str = "",
        link_text: Optional[str] = None,
    ) -> Tuple[str, str]:
        """Make a video link from a partial timestamp or from text containing one"""
        if url:
            youtube_id = _youtube_id(url, "href")
        elif youtube_id:
            youtube_id = _youtube_id(youtube_id)
        else:
            raise ParseError("either a youtube id or url is required")

        if partial is not None:
            timestamp = make(partial)
        elif text is not None:
            timestamp = parse(text)
        else:
            raise ParseError("either a timestamp or text containing one is required")

        html = youtube_link(
            timestamp,
            youtube_id,
            prefix=prefix,
            suffix=suffix,
            format=to_format(format),
            text=link_text,
        )
        return html, youtube_id
