"""
Service config from environment with defaults.
Uses pydantic-settings so all env vars are validated and documented in one model.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """
    All environment variables used by the video processing service.
    Env vars are read from os.environ (UPPER_SNAKE_CASE by default).
    """

    model_config = SettingsConfigDict(
        env_file=None,  # .env is loaded via bootstrap_env() before settings are read
        extra="ignore",
    )

    port: int = 3000

    # Buckets: raw uploads come in, resized videos go out (made public)
    raw_video_bucket: str = "ncode-ytube-raw-videos"
    processed_video_bucket: str = "ncode-ytube-processed-videos"

    # Local staging directories (created at startup)
    local_raw_video_dir: Path = Path("./raw-videos")
    local_processed_video_dir: Path = Path("./processed-videos")

    storage_provider: str = "gcp"  # gcp | aws
    aws_region: str | None = None
    s3_endpoint_url: str | None = None

    # Transcode: output height in pixels (width follows aspect ratio)
    transcode_target_height: int = Field(360, ge=2)
    # Kill ffmpeg after this many seconds; 0 or less means no limit
    transcode_timeout_sec: float = 600.0

    log_level: str = "INFO"


def get_settings() -> ServiceSettings:
    """Return validated settings from current environment."""
    return ServiceSettings()


def bootstrap_env() -> None:
    """
    Load .env from path in VIDEO_SERVICE_ENV_FILE if set (local development).
    Call once at startup before get_settings() so vars from the file are in os.environ.
    """
    import os

    import dotenv

    path = os.environ.get("VIDEO_SERVICE_ENV_FILE")
    if path:
        dotenv.load_dotenv(Path(path).resolve())
