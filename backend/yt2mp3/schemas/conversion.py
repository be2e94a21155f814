from typing import Optional

from pydantic import BaseModel


class InfoRequest(BaseModel):
    video_id: str


class ConversionRequest(InfoRequest):
    title: Optional[str] = None
    artist: Optional[str] = None

    def download_filename(self, extension: str = "mp3") -> str:
        """Attachment name: the title as given, or the video id without one."""
        return f"{self.title or self.video_id}.{extension}"
