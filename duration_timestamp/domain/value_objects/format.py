"""Timestamp format value object"""

from enum import Enum


class Format(Enum):
    """Textual styles a timestamp can be rendered in"""

    NUMERIC = "numeric"  # 1:02:03
    SECONDS = "seconds"  # 3723s
    TINY = "tiny"  # 1h2m3s
    SHORT = "short"  # 1h 2m 3s
    MEDIUM = "medium"  # 1 hours 2 mins 3 secs
    LONG = "long"  # 1 hours 2 minutes 3 seconds
