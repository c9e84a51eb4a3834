"""
Process one raw video: download, transcode, upload, clean up local staging.

Steps run strictly in sequence. Local files are removed on every exit path via
LocalStaging.staged; errors from download/transcode/upload propagate to the caller.
"""

import logging

from .interfaces import Transcoder
from .models import processed_name_for
from .storage import VideoStorage

logger = logging.getLogger(__name__)


def process_video(raw_name: str, video_storage: VideoStorage, transcoder: Transcoder) -> str:
    """
    Run the full pipeline for raw_name and return the processed object name.

    Raises:
        StorageError: download or upload failed (local files already cleaned up).
        TranscodeError: ffmpeg failed (local files already cleaned up).
    """
    processed_name = processed_name_for(raw_name)
    staging = video_storage.staging
    logger.info("process-video: name=%s start", raw_name)
    with staging.staged(raw_name, processed_name) as files:
        video_storage.download_raw_video(raw_name)
        transcoder.convert(files.raw_path, files.processed_path)
        video_storage.upload_processed_video(processed_name)
    logger.info("process-video: name=%s complete (processed=%s)", raw_name, processed_name)
    return processed_name
