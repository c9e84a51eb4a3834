"""
Cloud-agnostic interfaces for object storage and transcoding.

Implementations (GCS via google-cloud-storage, S3 via boto3, ffmpeg) live in
their own modules. The pipeline depends on these interfaces and receives the
implementation through app state, so tests can pass fakes.
"""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class ObjectStorage(Protocol):
    """Object storage: stream objects to and from local files, set public read."""

    def download_file(self, bucket: str, key: str, path: str) -> None:
        """Download bucket/key to the local path, overwriting it."""
        ...

    def upload_file(self, bucket: str, key: str, path: str) -> None:
        """Upload the local path to bucket/key. Returns once the object is written."""
        ...

    def make_public(self, bucket: str, key: str) -> None:
        """Grant anonymous read access to bucket/key."""
        ...


@runtime_checkable
class Transcoder(Protocol):
    """Converts a local video file into a resized local video file."""

    def convert(self, input_path: Path, output_path: Path) -> None:
        """Write the transcoded output. Raises TranscodeError on failure."""
        ...
