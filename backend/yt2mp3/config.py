import tempfile

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    # External tools
    tool_path: str = "yt-dlp"
    ffmpeg_location: str = ""  # Directory holding ffmpeg/ffprobe, empty = tool's default lookup

    # Extraction
    source_url_template: str = "https://www.youtube.com/watch?v={video_id}"
    audio_format: str = "mp3"
    audio_quality: str = "320K"
    scratch_dir: str = tempfile.gettempdir()

    # Limits (seconds)
    process_timeout: float = 600.0
    disconnect_poll_interval: float = 0.5

    # Server
    host: str = "0.0.0.0"
    port: int = 5044
    cors_origins: str = "*"
    cors_methods: str = "*"
    cors_headers: str = "*"
    https_redirect: bool = False

    # App Config
    environment: str = "development"
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_prefix = "YT2MP3_"


@lru_cache()
def get_settings() -> Settings:
    return Settings()
