"""
Tests for configuration module.
"""
from yt2mp3.config import Settings


class TestSettings:
    def test_default_settings(self):
        settings = Settings()

        assert settings.tool_path == "yt-dlp"
        assert settings.ffmpeg_location == ""
        assert settings.port == 5044
        assert settings.host == "0.0.0.0"
        assert settings.cors_origins == "*"
        assert settings.audio_quality == "320K"
        assert settings.process_timeout == 600.0

    def test_settings_from_env(self, monkeypatch):
        monkeypatch.setenv("YT2MP3_TOOL_PATH", "/opt/yt-dlp/yt-dlp")
        monkeypatch.setenv("YT2MP3_FFMPEG_LOCATION", "/opt/ffmpeg/bin")
        monkeypatch.setenv("YT2MP3_PORT", "8080")
        monkeypatch.setenv("YT2MP3_PROCESS_TIMEOUT", "30")

        settings = Settings()

        assert settings.tool_path == "/opt/yt-dlp/yt-dlp"
        assert settings.ffmpeg_location == "/opt/ffmpeg/bin"
        assert settings.port == 8080
        assert settings.process_timeout == 30.0
