"""
yt-dlp subprocess invoker.
Builds command lines for the external extraction tool, runs it without a shell
and captures both output streams. The child never outlives the awaiting task:
a timeout or a cancellation kills and reaps it.
"""
import asyncio
import logging
import os
import signal
from pathlib import Path
from typing import Optional

from yt2mp3.config import Settings
from yt2mp3.exceptions import ProcessLaunchError, ToolError, ToolTimeout
from yt2mp3.utils.youtube import build_metadata_args

logger = logging.getLogger(__name__)


class ProcessResult:
    def __init__(
        self,
        returncode: int,
        stdout: bytes,
        stderr: str,
    ):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def raise_for_status(self) -> None:
        """Raise ToolError carrying stderr if the tool exited non-zero."""
        if not self.ok:
            raise ToolError(self.returncode, self.stderr)


def build_convert_args(
    settings: Settings,
    url: str,
    output_path: Path,
    title: Optional[str] = None,
    artist: Optional[str] = None,
) -> list[str]:
    """Argument list for extracting tagged audio from a video into output_path."""
    args = [
        settings.tool_path,
        "-x",
        "--audio-format", settings.audio_format,
        "--audio-quality", settings.audio_quality,
        url,
        "-o", str(output_path),
    ]

    if settings.ffmpeg_location:
        args += ["--ffmpeg-location", settings.ffmpeg_location]

    # yt-dlp splits this string with shell rules before handing it to ffmpeg
    metadata_args = build_metadata_args(title, artist)
    if metadata_args:
        args += ["--postprocessor-args", metadata_args]

    return args


def build_info_args(settings: Settings, url: str) -> list[str]:
    """Argument list for dumping a single JSON document describing the video."""
    return [settings.tool_path, "-j", url]


async def _kill(process: asyncio.subprocess.Process) -> None:
    # Kill the whole session so helpers it spawned (ffmpeg) cannot hold the pipes open
    try:
        os.killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        pass
    await process.wait()


async def run_tool(args: list[str], timeout: Optional[float] = None) -> ProcessResult:
    """
    Run the extraction tool and wait for it to exit.

    stdout and stderr are drained concurrently while waiting so a chatty
    child cannot stall on a full pipe.

    Raises:
        ProcessLaunchError: the executable could not be started
        ToolTimeout: the tool ran longer than `timeout` seconds
    """
    try:
        process = await asyncio.create_subprocess_exec(
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=True,
        )
    except OSError as e:
        logger.error(f"Could not start {args[0]}: {e}")
        raise ProcessLaunchError(f"Error starting process: {e}")

    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
    except asyncio.TimeoutError:
        logger.warning(f"{args[0]} (pid {process.pid}) exceeded {timeout}s, killing it")
        await _kill(process)
        raise ToolTimeout(f"{Path(args[0]).name} did not finish within {timeout:g} seconds")
    except asyncio.CancelledError:
        logger.info(f"Request cancelled, killing {args[0]} (pid {process.pid})")
        await _kill(process)
        raise

    logger.info(f"Process exited with code {process.returncode}")
    return ProcessResult(
        returncode=process.returncode,
        stdout=stdout,
        stderr=stderr.decode("utf-8", errors="replace"),
    )
