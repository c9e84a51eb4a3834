"""Dependencies and app state for FastAPI routes.

Collaborators are built once per app and kept on app.state; tests set fakes
there before the first request.
"""

from fastapi import FastAPI, Request

from .config import ServiceSettings, get_settings
from .interfaces import Transcoder
from .staging import LocalStaging
from .storage import VideoStorage, object_storage_from_settings
from .transcode import FfmpegTranscoder


def settings_for_app(app: FastAPI) -> ServiceSettings:
    """Return settings from app state or read them from env."""
    settings = getattr(app.state, "settings", None)
    if settings is None:
        settings = get_settings()
        app.state.settings = settings
    return settings


def staging_for_app(app: FastAPI) -> LocalStaging:
    """Return LocalStaging from app state or build from settings."""
    staging = getattr(app.state, "staging", None)
    if staging is None:
        settings = settings_for_app(app)
        staging = LocalStaging(settings.local_raw_video_dir, settings.local_processed_video_dir)
        app.state.staging = staging
    return staging


def video_storage_for_app(app: FastAPI) -> VideoStorage:
    """Return VideoStorage from app state or build it around the configured provider."""
    video_storage = getattr(app.state, "video_storage", None)
    if video_storage is not None:
        return video_storage
    settings = settings_for_app(app)
    storage = getattr(app.state, "object_storage", None)
    if storage is None:
        storage = object_storage_from_settings(settings)
        app.state.object_storage = storage
    video_storage = VideoStorage(
        storage,
        staging_for_app(app),
        raw_bucket=settings.raw_video_bucket,
        processed_bucket=settings.processed_video_bucket,
    )
    app.state.video_storage = video_storage
    return video_storage


def transcoder_for_app(app: FastAPI) -> Transcoder:
    """Return Transcoder from app state or build an ffmpeg one from settings."""
    transcoder = getattr(app.state, "transcoder", None)
    if transcoder is None:
        settings = settings_for_app(app)
        transcoder = FfmpegTranscoder(
            target_height=settings.transcode_target_height,
            timeout_sec=settings.transcode_timeout_sec,
        )
        app.state.transcoder = transcoder
    return transcoder


def get_video_storage(request: Request) -> VideoStorage:
    return video_storage_for_app(request.app)


def get_transcoder(request: Request) -> Transcoder:
    return transcoder_for_app(request.app)
