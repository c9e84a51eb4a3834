"""Pytest fixtures: app with fake ObjectStorage and Transcoder, staging under tmp_path."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from video_processing_service.main import app
from video_processing_service.staging import LocalStaging
from video_processing_service.storage import VideoStorage

from tests.helpers import PROCESSED_BUCKET, RAW_BUCKET, FakeObjectStorage, FakeTranscoder


@pytest.fixture
def staging(tmp_path: Path) -> LocalStaging:
    s = LocalStaging(tmp_path / "raw-videos", tmp_path / "processed-videos")
    s.setup_directories()
    return s


@pytest.fixture
def fake_storage() -> FakeObjectStorage:
    return FakeObjectStorage()


@pytest.fixture
def fake_transcoder() -> FakeTranscoder:
    return FakeTranscoder()


@pytest.fixture
def video_storage(fake_storage: FakeObjectStorage, staging: LocalStaging) -> VideoStorage:
    return VideoStorage(
        fake_storage,
        staging,
        raw_bucket=RAW_BUCKET,
        processed_bucket=PROCESSED_BUCKET,
    )


@pytest.fixture
def app_with_fakes(
    staging: LocalStaging,
    video_storage: VideoStorage,
    fake_storage: FakeObjectStorage,
    fake_transcoder: FakeTranscoder,
) -> Iterator[None]:
    """Set app.state so routes use fakes; cleared afterwards."""
    app.state.staging = staging
    app.state.object_storage = fake_storage
    app.state.video_storage = video_storage
    app.state.transcoder = fake_transcoder
    yield
    for attr in ("settings", "staging", "object_storage", "video_storage", "transcoder"):
        if hasattr(app.state, attr):
            delattr(app.state, attr)


@pytest.fixture
def client(app_with_fakes: None) -> TestClient:
    return TestClient(app)


@pytest.fixture
def aws_credentials() -> None:
    """Set fake AWS credentials for moto."""
    os.environ["AWS_ACCESS_KEY_ID"] = "testing"
    os.environ["AWS_SECRET_ACCESS_KEY"] = "testing"
    os.environ["AWS_SECURITY_TOKEN"] = "testing"
    os.environ["AWS_SESSION_TOKEN"] = "testing"
    os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
