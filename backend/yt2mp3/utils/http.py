import asyncio
import logging
from typing import Awaitable, TypeVar
from urllib.parse import quote

from fastapi import Request

from yt2mp3.exceptions import ClientDisconnected

logger = logging.getLogger(__name__)

T = TypeVar("T")


def content_disposition(filename: str) -> str:
    """Attachment header for a filename, RFC 5987-encoded when not plain ASCII."""
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


async def run_until_disconnect(
    request: Request,
    work: Awaitable[T],
    poll_interval: float = 0.5,
) -> T:
    """
    Await `work` while checking whether the client is still connected.

    If the client goes away the work is cancelled (which kills any child
    process it owns) and ClientDisconnected is raised.
    """
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()

            if await request.is_disconnected():
                logger.info(f"Client disconnected from {request.url.path}, cancelling")
                task.cancel()
                try:
                    await task
                except asyncio.CancelledError:
                    pass
                raise ClientDisconnected("Client closed request")
    finally:
        if not task.done():
            task.cancel()
