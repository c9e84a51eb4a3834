"""Error taxonomy for the video processing pipeline.

Each error maps to one HTTP outcome in the request handler; see main.py.
"""


class VideoProcessingError(Exception):
    """Base class for all pipeline errors."""


class MalformedRequestError(VideoProcessingError):
    """Notification payload could not be decoded or has no usable object name."""


class StorageError(VideoProcessingError):
    """Download from or upload to object storage failed."""

    def __init__(self, operation: str, bucket: str, name: str, cause: Exception) -> None:
        super().__init__(f"{operation} failed for {bucket}/{name}: {cause}")
        self.operation = operation
        self.bucket = bucket
        self.name = name
        self.cause = cause


class TranscodeError(VideoProcessingError):
    """ffmpeg exited non-zero, was not found, or ran past its timeout."""

    def __init__(self, message: str, *, stderr: str = "") -> None:
        super().__init__(message)
        self.stderr = stderr


class StagingError(VideoProcessingError):
    """A local staging file could not be removed."""
