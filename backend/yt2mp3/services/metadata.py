"""
Video metadata service.
Asks yt-dlp for its JSON description of a video and hands it back untouched.
"""
import json
import logging

from yt2mp3.config import Settings
from yt2mp3.exceptions import MetadataParseError
from yt2mp3.schemas.conversion import InfoRequest
from yt2mp3.services.extractor import build_info_args, run_tool
from yt2mp3.utils.youtube import build_video_url

logger = logging.getLogger(__name__)


async def fetch_metadata(request: InfoRequest, settings: Settings) -> bytes:
    """
    Return the raw JSON document yt-dlp prints for a video.

    The document is parsed only to make sure it is JSON; the bytes returned
    are the tool's own output so nothing is reordered or reformatted.
    """
    url = build_video_url(request.video_id, settings.source_url_template)
    result = await run_tool(build_info_args(settings, url), timeout=settings.process_timeout)

    if not result.ok:
        logger.error(f"yt-dlp error output: {result.stderr}")
    result.raise_for_status()

    document = result.stdout.strip()
    try:
        json.loads(document)
    except ValueError as e:
        logger.error(f"yt-dlp printed invalid JSON for {request.video_id}: {e}")
        raise MetadataParseError(f"Invalid metadata from {settings.tool_path}: {e}")

    return document
