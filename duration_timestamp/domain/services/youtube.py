"""YouTube timestamp links and video identifiers"""

import re
from html import escape
from typing import Iterable, Optional, Union
from urllib.parse import parse_qs, quote, urlsplit

from duration_timestamp.core.config import settings
from duration_timestamp.domain.services.formatter import stringify
from duration_timestamp.domain.value_objects.format import Format
from duration_timestamp.domain.value_objects.timestamp import Timestamp

YOUTUBE_HOSTS = ("youtube.com", "www.youtube.com", "m.youtube.com")
SHORT_HOSTS = ("youtu.be", "www.youtu.be")

# Video id from a youtube embed link, e.g. https://www.youtube.com/embed/ID?start=5
EMBED_PATH_REGEX = re.compile(r"^/embed/([^/?]+)")

# Attribute of a player element which holds the bare video id
PLAYER_ATTRIBUTE = "data-youtube-id"


def youtube_link(
    timestamp: Timestamp,
    youtube_id: str,
    prefix: str = "",
    suffix: str = "",
    format: Union[Format, str] = Format.SHORT,
    text: Optional[str] = None,
) -> str:
    """Make a HTML link for a youtube video to commence at a timestamp.

    The link text is ``text`` when given, otherwise the timestamp in
    ``format``. An empty timestamp without ``text`` has no link text, in
    which case the empty string is returned instead of a link.
    """
    if text is None:
        text = "" if timestamp.is_zero() else stringify(timestamp, format)
    if not text:
        return text

    url = (
        f"{settings.youtube_watch_url}?v={quote(youtube_id, safe='')}"
        f"&t={stringify(timestamp, Format.TINY)}"
    )
    title = f"View the video {youtube_id} at {stringify(timestamp, Format.LONG)}"
    return f'{prefix}<a href="{escape(url)}" title="{escape(title)}">{text}</a>{suffix}'


def extract_youtube_id(value: Optional[str], attribute: str = "href") -> str:
    """Extract the video id from a href, src or data-youtube-id attribute value.

    Only ``data-youtube-id`` values are taken as they are, ``href`` and
    ``src`` values must be absolute youtube urls.
    """
    if not value:
        return ""
    value = value.strip()
    if attribute == PLAYER_ATTRIBUTE:
        return value

    url = urlsplit(value)
    if url.scheme not in ("http", "https"):
        return ""
    host = url.netloc.lower()
    if host in YOUTUBE_HOSTS:
        if url.path == "/watch":
            return parse_qs(url.query).get("v", [""])[0]
        embed = EMBED_PATH_REGEX.match(url.path)
        if embed:
            return embed.group(1)
    elif host in SHORT_HOSTS:
        return url.path.split("/")[1] if url.path else ""
    return ""


def extract_youtube_playlist_id(value: Optional[str]) -> str:
    """Extract the playlist id from a youtube href or src attribute value"""
    if not value:
        return ""
    url = urlsplit(value.strip())
    if url.scheme not in ("http", "https"):
        return ""
    if url.netloc.lower() not in YOUTUBE_HOSTS:
        return ""
    return parse_qs(url.query).get("list", [""])[0]


def find_youtube_id(values: Iterable[Optional[str]], attribute: str = "href") -> str:
    """Get the first video id found within attribute values"""
    for value in values:
        youtube_id = extract_youtube_id(value, attribute)
        if youtube_id:
            return youtube_id
    return ""


def find_youtube_playlist_id(values: Iterable[Optional[str]]) -> str:
    """Get the first playlist id found within attribute values"""
    for value in values:
        playlist_id = extract_youtube_playlist_id(value)
        if playlist_id:
            return playlist_id
    return ""
