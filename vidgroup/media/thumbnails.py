"""Thumbnail extraction with ffmpeg."""

import subprocess
from pathlib import Path
from typing import List, Optional

from loguru import logger

from vidgroup.config.context import SessionContext, resolve_context
from vidgroup.config.settings import (
    THUMBNAIL_CODEC,
    THUMBNAIL_FRAME_COUNT,
    THUMBNAIL_MIME_TYPE,
    THUMBNAIL_SEEK_OFFSET,
)
from vidgroup.exceptions import (
    ThumbnailError,
    ThumbnailNoDataError,
    ThumbnailTimeoutError,
    ThumbnailToolError,
    ThumbnailToolNotFoundError,
)
from vidgroup.models.thumbnail import Thumbnail


def build_ffmpeg_command(
    video_path: Path,
    ffmpeg: str,
    seek: str = THUMBNAIL_SEEK_OFFSET,
) -> List[str]:
    """
    Build the ffmpeg command writing one JPEG frame to stdout.

    Args:
        video_path: Input video.
        ffmpeg: ffmpeg executable.
        seek: Offset of the frame to grab (HH:MM:SS).

    Returns:
        Argument list for subprocess.
    """
    return [
        ffmpeg,
        "-i", str(video_path),
        "-ss", seek,
        "-vframes", str(THUMBNAIL_FRAME_COUNT),
        "-f", "image2pipe",
        "-c:v", THUMBNAIL_CODEC,
        "-",
    ]


def _decode_stderr(stderr: Optional[bytes]) -> str:
    return (stderr or b"").decode("utf-8", errors="replace").strip()


def _run_ffmpeg(
    video_path: Path,
    command: List[str],
    timeout: Optional[float],
) -> subprocess.CompletedProcess:
    try:
        return subprocess.run(
            command,
            capture_output=True,
            stdin=subprocess.DEVNULL,
            check=False,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise ThumbnailToolNotFoundError(video_path, command[0]) from e
    except subprocess.TimeoutExpired as e:
        raise ThumbnailTimeoutError(video_path, timeout) from e
    except OSError as e:
        raise ThumbnailToolError(video_path, f"ffmpeg could not be started for {video_path}: {e}") from e


def extract_thumbnail(
    video_path: Path,
    ctx: Optional[SessionContext] = None,
    seek: str = THUMBNAIL_SEEK_OFFSET,
    timeout: Optional[float] = None,
) -> Thumbnail:
    """
    Extract one frame of a video as JPEG bytes.

    The frame is piped through ffmpeg's stdout; nothing is written to
    disk. There is no retry and no fallback offset.

    Args:
        video_path: Video file.
        ctx: Session context (ffmpeg executable and notifier).
        seek: Offset of the frame to grab.
        timeout: Seconds before giving up, None to wait forever.

    Returns:
        Thumbnail holding the encoded image.

    Raises:
        ThumbnailToolNotFoundError: If ffmpeg is not installed.
        ThumbnailToolError: If ffmpeg exits with a non-zero status.
        ThumbnailNoDataError: If ffmpeg exits cleanly without output.
        ThumbnailTimeoutError: If timeout expires.
    """
    ctx = resolve_context(ctx)
    video_path = Path(video_path)
    logger.info(f"Generating thumbnail for: {video_path}")

    try:
        completed = _run_ffmpeg(video_path, build_ffmpeg_command(video_path, ctx.ffmpeg, seek), timeout)
        stderr = _decode_stderr(completed.stderr)

        if completed.returncode != 0:
            raise ThumbnailToolError(
                video_path,
                f"ffmpeg execution failed for {video_path} (exit code {completed.returncode}). Stderr: {stderr}",
                returncode=completed.returncode,
                stderr=stderr,
            )

        if not completed.stdout:
            if stderr:
                logger.warning(f"ffmpeg produced no thumbnail data for {video_path}. Stderr: {stderr}")
            raise ThumbnailNoDataError(video_path, stderr)
    except ThumbnailError as e:
        logger.error(str(e))
        ctx.error(str(e))
        raise

    thumbnail = Thumbnail(source=video_path, data=completed.stdout, mime_type=THUMBNAIL_MIME_TYPE)
    logger.info(f"Successfully generated thumbnail for: {video_path} ({thumbnail.size} bytes)")
    return thumbnail
