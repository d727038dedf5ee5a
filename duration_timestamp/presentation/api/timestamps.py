"""Timestamp API endpoints"""

import logging

from fastapi import APIRouter, HTTPException, status

from duration_timestamp.application.use_cases.timestamp_use_cases import (
    MakeTimestampUseCase,
    ParseTimestampUseCase,
    ReplaceTimestampsUseCase,
    StringifyTimestampUseCase,
    YoutubeLinkUseCase,
)
from duration_timestamp.domain.exceptions import TimestampError
from duration_timestamp.domain.services.formatter import stringify
from duration_timestamp.domain.value_objects.format import Format
from duration_timestamp.domain.value_objects.timestamp import Timestamp
from duration_timestamp.presentation.schemas.common_schemas import ErrorResponse
from duration_timestamp.presentation.schemas.timestamp_schemas import (
    ParseRequest,
    PartialTimestampSchema,
    ReplaceRequest,
    ReplaceResponse,
    StringifyRequest,
    StringifyResponse,
    TimestampResponse,
    YoutubeLinkRequest,
    YoutubeLinkResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}


def _timestamp_response(timestamp: Timestamp) -> TimestampResponse:
    formats = {format.value: stringify(timestamp, format) for format in Format}
    return TimestampResponse.from_timestamp(timestamp, formats)


@router.post(
    "/parse",
    response_model=TimestampResponse,
    responses=ERROR_RESPONSES,
    summary="Parse timestamp",
    description=(
        "Extract the first timestamp (00:00:00 or 1h 2m 3s style) from text. "
        "prefix and suffix are regular expression fragments and must come from trusted callers"
    ),
)
async def parse_timestamp(request: ParseRequest) -> TimestampResponse:
    """Parse the first timestamp within text"""
    try:
        timestamp = ParseTimestampUseCase().execute(
            request.text, request.prefix, request.suffix, request.ignore_case
        )
        return _timestamp_response(timestamp)

    except TimestampError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Failed to parse timestamp")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while parsing the timestamp",
        )


@router.post(
    "/make",
    response_model=TimestampResponse,
    responses=ERROR_RESPONSES,
    summary="Make timestamp",
    description="Normalize a timestamp where any of total, hours, minutes and seconds may be missing",
)
async def make_timestamp(request: PartialTimestampSchema) -> TimestampResponse:
    """Normalize a partial timestamp"""
    try:
        timestamp = MakeTimestampUseCase().execute(request.to_partial())
        return _timestamp_response(timestamp)

    except TimestampError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Failed to make timestamp")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while making the timestamp",
        )


@router.post(
    "/stringify",
    response_model=StringifyResponse,
    responses=ERROR_RESPONSES,
    summary="Stringify timestamp",
    description="Render a timestamp in one of the numeric, seconds, tiny, short, medium or long formats",
)
async def stringify_timestamp(request: StringifyRequest) -> StringifyResponse:
    """Render a timestamp"""
    try:
        text = StringifyTimestampUseCase().execute(request.timestamp.to_partial(), request.format)
        return StringifyResponse(text=text, format=request.format)

    except TimestampError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Failed to stringify timestamp")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while stringifying the timestamp",
        )


@router.post(
    "/replace",
    response_model=ReplaceResponse,
    responses=ERROR_RESPONSES,
    summary="Replace timestamps",
    description=(
        "Rewrite every timestamp within text in a format, or as a link to a youtube video. "
        "prefix and suffix are regular expression fragments and must come from trusted callers"
    ),
)
async def replace_timestamps(request: ReplaceRequest) -> ReplaceResponse:
    """Replace every timestamp within text"""
    try:
        text, replacements = ReplaceTimestampsUseCase().execute(
            request.text,
            request.format,
            prefix=request.prefix,
            suffix=request.suffix,
            ignore_case=request.ignore_case,
            youtube_id=request.youtube_id,
        )
        return ReplaceResponse(text=text, replacements=replacements)

    except TimestampError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Failed to replace timestamps")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while replacing timestamps",
        )


@router.post(
    "/youtube",
    response_model=YoutubeLinkResponse,
    responses=ERROR_RESPONSES,
    summary="Link youtube video",
    description="Make a HTML link that starts a youtube video at a timestamp",
)
async def youtube_timestamp_link(request: YoutubeLinkRequest) -> YoutubeLinkResponse:
    """Make a youtube link at a timestamp"""
    try:
        logger.info(f"Linking youtube video {request.url or request.youtube_id}")
        html, youtube_id = YoutubeLinkUseCase().execute(
            youtube_id=request.youtube_id,
            url=request.url,
            partial=request.timestamp.to_partial() if request.timestamp else None,
            text=request.text,
            format=request.format,
            prefix=request.prefix,
            suffix=request.suffix,
            link_text=request.link_text,
        )
        return YoutubeLinkResponse(html=html, youtube_id=youtube_id)

    except TimestampError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Failed to link youtube video")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An error occurred while linking the video",
        )
