"""Video processing service: resize newly uploaded raw videos and publish them."""

from .errors import (
    MalformedRequestError,
    StagingError,
    StorageError,
    TranscodeError,
    VideoProcessingError,
)
from .interfaces import ObjectStorage, Transcoder
from .models import PushEnvelope, PushMessage, StorageObjectEvent, parse_push_body

__version__ = "0.1.0"
__all__ = [
    "MalformedRequestError",
    "ObjectStorage",
    "PushEnvelope",
    "PushMessage",
    "StagingError",
    "StorageError",
    "StorageObjectEvent",
    "TranscodeError",
    "Transcoder",
    "VideoProcessingError",
    "parse_push_body",
]
