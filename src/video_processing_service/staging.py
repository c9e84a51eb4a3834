"""
Local staging directories for raw and processed videos.

Files live here only while a request is being processed. `staged` hands out the
two per-request paths and removes both files on exit, whatever the outcome.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from concurrent.futures import ThreadPoolExecutor
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path

from .errors import StagingError

logger = logging.getLogger(__name__)


def ensure_directory(path: str | Path) -> None:
    """Create the directory (and parents) if it does not exist."""
    path = Path(path)
    if path.is_dir():
        return
    path.mkdir(parents=True, exist_ok=True)
    logger.info("staging: directory created at %s", path)


def delete_if_exists(path: str | Path) -> None:
    """
    Delete a file if present. Missing files are logged and skipped.

    Raises:
        StagingError: the file exists but could not be removed.
    """
    path = Path(path)
    if not path.exists():
        logger.info("staging: file not found at %s, skipping the delete", path)
        return
    try:
        path.unlink()
    except FileNotFoundError:
        logger.info("staging: file already gone at %s", path)
        return
    except OSError as e:
        logger.warning("staging: error deleting file %s: %s", path, e)
        raise StagingError(f"Could not delete {path}: {e}") from e
    logger.info("staging: file deleted at %s", path)


@dataclass(frozen=True)
class StagedFiles:
    """Local paths for one request's raw and processed artifacts."""

    raw_path: Path
    processed_path: Path


class LocalStaging:
    """The raw and processed staging directories of this process."""

    def __init__(self, raw_dir: str | Path, processed_dir: str | Path) -> None:
        self.raw_dir = Path(raw_dir)
        self.processed_dir = Path(processed_dir)

    def setup_directories(self) -> None:
        """Create both staging directories. Safe to call repeatedly."""
        ensure_directory(self.raw_dir)
        ensure_directory(self.processed_dir)

    def raw_path(self, name: str) -> Path:
        return self.raw_dir / name

    def processed_path(self, name: str) -> Path:
        return self.processed_dir / name

    def cleanup(self, files: StagedFiles) -> None:
        """
        Delete both staged files in parallel and wait for both.
        Delete failures are logged, not raised.
        """
        paths = (files.raw_path, files.processed_path)
        with ThreadPoolExecutor(max_workers=len(paths), thread_name_prefix="cleanup") as pool:
            futures = [pool.submit(delete_if_exists, p) for p in paths]
        for path, future in zip(paths, futures):
            err = future.exception()
            if err is not None:
                logger.warning("staging: cleanup left %s behind: %s", path, err)

    @contextmanager
    def staged(self, raw_name: str, processed_name: str) -> Iterator[StagedFiles]:
        """Yield the local paths for a request; remove both files on every exit path."""
        files = StagedFiles(
            raw_path=self.raw_path(raw_name),
            processed_path=self.processed_path(processed_name),
        )
        try:
            yield files
        finally:
            self.cleanup(files)
