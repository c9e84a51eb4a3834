"""Shared test helpers: push body builder and fake collaborators."""

import base64
import json
from pathlib import Path

from video_processing_service.errors import TranscodeError

RAW_BUCKET = "raw-bucket"
PROCESSED_BUCKET = "processed-bucket"


def make_push_body(event: object) -> dict:
    """Build a push delivery body whose message.data is the base64 JSON of event."""
    data = base64.b64encode(json.dumps(event).encode("utf-8")).decode("ascii")
    return {
        "message": {"data": data, "messageId": "1"},
        "subscription": "projects/p/subscriptions/s",
    }


class FakeObjectStorage:
    """ObjectStorage for tests: in-memory objects, records every call."""

    def __init__(self) -> None:
        self.objects: dict[tuple[str, str], bytes] = {}
        self.public: set[tuple[str, str]] = set()
        self.calls: list[tuple[str, str, str]] = []
        self.fail_upload = False

    def download_file(self, bucket: str, key: str, path: str) -> None:
        self.calls.append(("download_file", bucket, key))
        if (bucket, key) not in self.objects:
            raise FileNotFoundError(f"No such object: {bucket}/{key}")
        Path(path).write_bytes(self.objects[(bucket, key)])

    def upload_file(self, bucket: str, key: str, path: str) -> None:
        self.calls.append(("upload_file", bucket, key))
        if self.fail_upload:
            raise ConnectionError("upload refused")
        self.objects[(bucket, key)] = Path(path).read_bytes()

    def make_public(self, bucket: str, key: str) -> None:
        self.calls.append(("make_public", bucket, key))
        if (bucket, key) not in self.objects:
            raise FileNotFoundError(f"No such object: {bucket}/{key}")
        self.public.add((bucket, key))


class FakeTranscoder:
    """Transcoder for tests: writes '360p:' + input bytes, or fails after a partial write."""

    def __init__(self) -> None:
        self.fail = False
        self.calls: list[tuple[Path, Path]] = []

    def convert(self, input_path: Path, output_path: Path) -> None:
        self.calls.append((input_path, output_path))
        if self.fail:
            output_path.write_bytes(b"partial")
            raise TranscodeError("ffmpeg exited with status 1", stderr="Invalid data found")
        output_path.write_bytes(b"360p:" + input_path.read_bytes())
