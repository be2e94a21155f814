"""
Audio conversion service.
Runs yt-dlp to extract tagged audio into a per-request scratch directory,
loads the result into memory and removes the whole directory before returning,
so partial downloads and intermediate files go with it.
"""
import asyncio
import logging
import mimetypes
import tempfile
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from yt2mp3.config import Settings
from yt2mp3.schemas.conversion import ConversionRequest
from yt2mp3.services.extractor import build_convert_args, run_tool
from yt2mp3.utils.youtube import build_video_url, safe_scratch_name

logger = logging.getLogger(__name__)

# Thread pool for blocking file reads
_executor = ThreadPoolExecutor(max_workers=4)

DEFAULT_MEDIA_TYPE = "audio/mpeg"


class ConvertedAudio:
    def __init__(self, content: bytes, filename: str, media_type: str = DEFAULT_MEDIA_TYPE):
        self.content = content
        self.filename = filename
        self.media_type = media_type


def media_type_for(filename: str) -> str:
    """Content type for the produced audio, audio/mpeg when unknown."""
    return mimetypes.guess_type(filename)[0] or DEFAULT_MEDIA_TYPE


def _read_file(path: Path) -> bytes:
    with open(path, "rb") as f:
        return f.read()


async def convert_video(request: ConversionRequest, settings: Settings) -> ConvertedAudio:
    """
    Convert a video to an audio file with title/artist tags.

    Raises ToolError when yt-dlp fails, ProcessLaunchError/ToolTimeout from the
    invoker, and OSError if the produced file cannot be read.
    """
    url = build_video_url(request.video_id, settings.source_url_template)
    name = safe_scratch_name(request.video_id)

    with tempfile.TemporaryDirectory(
        prefix=f"{name}-", dir=settings.scratch_dir, ignore_cleanup_errors=True
    ) as work_dir:
        output_path = Path(work_dir) / f"{name}.{settings.audio_format}"

        logger.info("Starting conversion...")
        logger.info(f"URL: {url}")
        logger.info(f"Output Path: {output_path}")
        logger.info(f"Title: {request.title}")
        logger.info(f"Artist: {request.artist}")

        args = build_convert_args(settings, url, output_path, request.title, request.artist)
        result = await run_tool(args, timeout=settings.process_timeout)
        if not result.ok:
            logger.error(f"yt-dlp error output: {result.stderr}")
        result.raise_for_status()

        logger.info("Conversion successful")
        loop = asyncio.get_event_loop()
        content = await loop.run_in_executor(_executor, _read_file, output_path)

    filename = request.download_filename(settings.audio_format)
    return ConvertedAudio(content=content, filename=filename, media_type=media_type_for(filename))
