import logging

from fastapi import APIRouter, Request, Response

from yt2mp3.dependencies import InfoRequestDep, SettingsDep
from yt2mp3.exceptions import UnhandledFault, Yt2Mp3Error
from yt2mp3.services.metadata import fetch_metadata
from yt2mp3.utils.http import run_until_disconnect

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/getinfo")
async def get_info(request: Request, info: InfoRequestDep, settings: SettingsDep):
    """Return yt-dlp's JSON metadata document for a video, unmodified."""
    try:
        document = await run_until_disconnect(
            request,
            fetch_metadata(info, settings),
            poll_interval=settings.disconnect_poll_interval,
        )
    except Yt2Mp3Error:
        raise
    except Exception as e:
        logger.exception(f"Fetching info for {info.video_id} failed")
        raise UnhandledFault(f"There was an error fetching the YT video info: {e}")

    return Response(content=document, media_type="application/json")
