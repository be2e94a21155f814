"""
Audio conversion endpoint.
Turns a video id into a downloadable, tagged MP3.
"""
import logging

from fastapi import APIRouter, Request, Response

from yt2mp3.dependencies import ConversionRequestDep, SettingsDep
from yt2mp3.exceptions import UnhandledFault, Yt2Mp3Error
from yt2mp3.services.converter import convert_video
from yt2mp3.utils.http import content_disposition, run_until_disconnect

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/convert")
async def convert(request: Request, conversion: ConversionRequestDep, settings: SettingsDep):
    """Download the video's audio as MP3 with title/artist tags."""
    try:
        audio = await run_until_disconnect(
            request,
            convert_video(conversion, settings),
            poll_interval=settings.disconnect_poll_interval,
        )
    except Yt2Mp3Error:
        raise
    except Exception as e:
        logger.exception(f"Conversion of {conversion.video_id} failed")
        raise UnhandledFault(f"There was an error converting the YT video: {e}")

    return Response(
        content=audio.content,
        media_type=audio.media_type,
        headers={"Content-Disposition": content_disposition(audio.filename)},
    )
