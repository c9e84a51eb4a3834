"""Tests for local staging: directory setup, delete-if-exists, scoped cleanup."""

from pathlib import Path
from unittest.mock import patch

import pytest

from video_processing_service.errors import StagingError
from video_processing_service.staging import LocalStaging, delete_if_exists, ensure_directory


def test_ensure_directory_creates_nested(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"
    ensure_directory(target)
    assert target.is_dir()


def test_setup_directories_is_idempotent(tmp_path: Path) -> None:
    """Running setup twice never errors and keeps existing contents."""
    staging = LocalStaging(tmp_path / "raw-videos", tmp_path / "processed-videos")
    staging.setup_directories()
    keep = staging.raw_dir / "existing.mp4"
    keep.write_bytes(b"keep me")

    staging.setup_directories()

    assert keep.read_bytes() == b"keep me"
    assert staging.processed_dir.is_dir()


def test_delete_if_exists_missing_path_is_noop(tmp_path: Path) -> None:
    missing = tmp_path / "missing.mp4"
    before = sorted(tmp_path.iterdir())
    delete_if_exists(missing)
    assert sorted(tmp_path.iterdir()) == before


def test_delete_if_exists_removes_file(tmp_path: Path) -> None:
    f = tmp_path / "v.mp4"
    f.write_bytes(b"x")
    delete_if_exists(f)
    assert not f.exists()


def test_delete_if_exists_raises_staging_error_on_failure(tmp_path: Path) -> None:
    f = tmp_path / "locked.mp4"
    f.write_bytes(b"x")
    with patch.object(Path, "unlink", side_effect=PermissionError("denied")):
        with pytest.raises(StagingError, match="Could not delete"):
            delete_if_exists(f)
    assert f.exists()


def test_staged_removes_both_files_on_success(tmp_path: Path) -> None:
    staging = LocalStaging(tmp_path / "raw", tmp_path / "processed")
    staging.setup_directories()
    with staging.staged("v.mp4", "processed-v.mp4") as files:
        assert files.raw_path == staging.raw_dir / "v.mp4"
        assert files.processed_path == staging.processed_dir / "processed-v.mp4"
        files.raw_path.write_bytes(b"raw")
        files.processed_path.write_bytes(b"out")
    assert not files.raw_path.exists()
    assert not files.processed_path.exists()


def test_staged_removes_files_when_body_raises(tmp_path: Path) -> None:
    staging = LocalStaging(tmp_path / "raw", tmp_path / "processed")
    staging.setup_directories()
    with pytest.raises(RuntimeError):
        with staging.staged("v.mp4", "processed-v.mp4") as files:
            files.raw_path.write_bytes(b"raw")
            raise RuntimeError("boom")
    assert not files.raw_path.exists()


def test_cleanup_logs_delete_failures(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    staging = LocalStaging(tmp_path / "raw", tmp_path / "processed")
    staging.setup_directories()
    with patch(
        "video_processing_service.staging.delete_if_exists",
        side_effect=StagingError("Could not delete"),
    ):
        with staging.staged("v.mp4", "processed-v.mp4"):
            pass
    assert "cleanup left" in caplog.text


def test_same_name_requests_share_staging_paths(tmp_path: Path) -> None:
    """Known limitation: overlapping requests for one name share local paths, no locking.
    The inner request's cleanup removes the file the outer request is still using."""
    staging = LocalStaging(tmp_path / "raw", tmp_path / "processed")
    staging.setup_directories()
    with staging.staged("v.mp4", "processed-v.mp4") as outer:
        outer.raw_path.write_bytes(b"outer raw")
        with staging.staged("v.mp4", "processed-v.mp4") as inner:
            assert inner.raw_path == outer.raw_path
            assert inner.processed_path == outer.processed_path
        assert not outer.raw_path.exists()
