"""
FFmpeg-based transcoding: rescale to a fixed output height, keeping aspect ratio.

Runs `ffmpeg -y -i <in> -vf scale=-2:<height> <out>`. The -2 keeps the width
even so the default H.264 encoder accepts it.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from .errors import TranscodeError

logger = logging.getLogger(__name__)

DEFAULT_TARGET_HEIGHT = 360  # 360p
DEFAULT_TIMEOUT_SEC = 600.0
STDERR_TAIL_CHARS = 2000


def build_ffmpeg_command(
    input_path: str | Path,
    output_path: str | Path,
    *,
    target_height: int = DEFAULT_TARGET_HEIGHT,
    ffmpeg_bin: str = "ffmpeg",
) -> list[str]:
    """Return the ffmpeg argv for a scale-only transcode."""
    return [
        ffmpeg_bin,
        "-y",
        "-i",
        str(input_path),
        "-vf",
        f"scale=-2:{target_height}",
        str(output_path),
    ]


def _stderr_tail(stderr: bytes | str | None) -> str:
    if not stderr:
        return ""
    if isinstance(stderr, bytes):
        stderr = stderr.decode("utf-8", errors="replace")
    return stderr[-STDERR_TAIL_CHARS:]


class FfmpegTranscoder:
    """Transcoder that shells out to ffmpeg."""

    def __init__(
        self,
        *,
        target_height: int = DEFAULT_TARGET_HEIGHT,
        timeout_sec: float | None = DEFAULT_TIMEOUT_SEC,
        ffmpeg_bin: str = "ffmpeg",
    ) -> None:
        self.target_height = target_height
        self.timeout_sec = timeout_sec if timeout_sec and timeout_sec > 0 else None
        self.ffmpeg_bin = ffmpeg_bin

    def convert(self, input_path: Path, output_path: Path) -> None:
        """
        Transcode input_path into output_path.

        Raises:
            TranscodeError: ffmpeg is missing, exits non-zero, or exceeds the timeout
                (the process is killed before raising).
        """
        cmd = build_ffmpeg_command(
            input_path,
            output_path,
            target_height=self.target_height,
            ffmpeg_bin=self.ffmpeg_bin,
        )
        logger.info("transcode: %s -> %s (height=%s)", input_path, output_path, self.target_height)
        try:
            subprocess.run(cmd, check=True, capture_output=True, timeout=self.timeout_sec)
        except FileNotFoundError as e:
            logger.warning("transcode: %s not found", self.ffmpeg_bin)
            raise TranscodeError(f"{self.ffmpeg_bin} is not installed") from e
        except subprocess.TimeoutExpired as e:
            logger.warning("transcode: %s timed out after %ss", input_path, self.timeout_sec)
            raise TranscodeError(
                f"ffmpeg timed out after {self.timeout_sec}s",
                stderr=_stderr_tail(e.stderr),
            ) from e
        except subprocess.CalledProcessError as e:
            tail = _stderr_tail(e.stderr)
            logger.warning(
                "transcode: ffmpeg exited %s for %s: %s", e.returncode, input_path, tail
            )
            raise TranscodeError(f"ffmpeg exited with status {e.returncode}", stderr=tail) from e
        logger.info("transcode: processing finished for %s", output_path)
