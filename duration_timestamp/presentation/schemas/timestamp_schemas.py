"""Timestamp schemas for request/response validation"""

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from duration_timestamp.core.config import settings
from duration_timestamp.domain.value_objects.format import Format
from duration_timestamp.domain.value_objects.timestamp import PartialTimestamp, Timestamp


class PartialTimestampSchema(BaseModel):
    """Schema for a timestamp where any unit may be missing"""

    total: Optional[int] = Field(default=None, ge=0)
    hours: Optional[int] = Field(default=None, ge=0)
    minutes: Optional[int] = Field(default=None, ge=0)
    seconds: Optional[int] = Field(default=None, ge=0)

    model_config = ConfigDict(
        json_schema_extra={"example": {"hours": 1, "minutes": 2, "seconds": 3}}
    )

    def to_partial(self) -> PartialTimestamp:
        """Convert to the domain value object"""
        return PartialTimestamp(
            total=self.total, hours=self.hours, minutes=self.minutes, seconds=self.seconds
        )


class ParseRequest(BaseModel):
    """Schema for parsing a timestamp out of text"""

    text: str = Field(..., min_length=1, max_length=settings.max_text_length)
    prefix: str = Field(default="", max_length=settings.max_pattern_length)
    suffix: str = Field(default="", max_length=settings.max_pattern_length)
    ignore_case: bool = False

    model_config = ConfigDict(json_schema_extra={"example": {"text": "skip to 1h 2m 3s"}})


class StringifyRequest(BaseModel):
    """Schema for rendering a timestamp"""

    timestamp: PartialTimestampSchema
    format: Format = Field(default_factory=lambda: settings.default_format)

    model_config = ConfigDict(
        json_schema_extra={"example": {"timestamp": {"seconds": 125}, "format": "long"}}
    )


class ReplaceRequest(BaseModel):
    """Schema for replacing timestamps within text"""

    text: str = Field(..., max_length=settings.max_text_length)
    format: Format = Field(default_factory=lambda: settings.default_format)
    prefix: str = Field(default="", max_length=settings.max_pattern_length)
    suffix: str = Field(default="", max_length=settings.max_pattern_length)
    ignore_case: bool = False
    youtube_id: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "text": "1:02 intro - 12:30 outro",
                "format": "short",
                "suffix": " [-—]",
            }
        }
    )


class YoutubeLinkRequest(BaseModel):
    """Schema for linking a video at a timestamp"""

    youtube_id: Optional[str] = None
    url: Optional[str] = None
    timestamp: Optional[PartialTimestampSchema] = None
    text: Optional[str] = Field(default=None, max_length=settings.max_text_length)
    format: Format = Field(default_factory=lambda: settings.default_format)
    prefix: str = ""
    suffix: str = ""
    link_text: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "youtube_id": "dQw4w9WgXcQ",
                "text": "1m 30s",
                "suffix": " —",
            }
        }
    )

    @model_validator(mode="after")
    def check_sources(self) -> "YoutubeLinkRequest":
        """Require a video and a timestamp source"""
        if not self.youtube_id and not self.url:
            raise ValueError("either youtube_id or url is required")
        if self.timestamp is None and self.text is None:
            raise ValueError("either timestamp or text is required")
        return self


class TimestampResponse(BaseModel):
    """Schema for a normalized timestamp"""

    total: int
    hours: int
    minutes: int
    seconds: int
    formats: Dict[str, str]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "total": 3723,
                "hours": 1,
                "minutes": 2,
                "seconds": 3,
                "formats": {
                    "numeric": "1:02:03",
                    "seconds": "3723s",
                    "tiny": "1h2m3s",
                    "short": "1h 2m 3s",
                    "medium": "1 hours 2 mins 3 secs",
                    "long": "1 hours 2 minutes 3 seconds",
                },
            }
        }
    )

    @classmethod
    def from_timestamp(cls, timestamp: Timestamp, formats: Dict[str, str]) -> "TimestampResponse":
        """Create response from a timestamp and its renderings"""
        return cls(**timestamp.to_dict(), formats=formats)


class StringifyResponse(BaseModel):
    """Schema for a rendered timestamp"""

    text: str
    format: Format


class ReplaceResponse(BaseModel):
    """Schema for replaced text"""

    text: str
    replacements: int


class YoutubeLinkResponse(BaseModel):
    """Schema for a video link"""

    html: str
    youtube_id: str
