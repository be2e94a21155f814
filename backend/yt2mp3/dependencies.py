from typing import Annotated, Optional

from fastapi import Depends, Query

from yt2mp3.config import Settings, get_settings
from yt2mp3.exceptions import InvalidRequest
from yt2mp3.schemas.conversion import ConversionRequest, InfoRequest

BLANK_VIDEO_ID = "Video ID cannot be blank"


def _require_video_id(video_id: Optional[str]) -> str:
    if not video_id:
        raise InvalidRequest(BLANK_VIDEO_ID)
    return video_id


async def get_conversion_request(
    video_id: Annotated[Optional[str], Query(alias="videoId")] = None,
    title: Annotated[Optional[str], Query()] = None,
    artist: Annotated[Optional[str], Query()] = None,
) -> ConversionRequest:
    """
    Dependency building a ConversionRequest from the query string.
    An absent or empty videoId is rejected before any work starts.
    """
    return ConversionRequest(
        video_id=_require_video_id(video_id),
        title=title,
        artist=artist,
    )


async def get_info_request(
    video_id: Annotated[Optional[str], Query(alias="videoId")] = None,
) -> InfoRequest:
    return InfoRequest(video_id=_require_video_id(video_id))


# Type aliases for cleaner dependency injection
SettingsDep = Annotated[Settings, Depends(get_settings)]
ConversionRequestDep = Annotated[ConversionRequest, Depends(get_conversion_request)]
InfoRequestDep = Annotated[InfoRequest, Depends(get_info_request)]
