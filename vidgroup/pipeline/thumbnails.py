"""Bounded fan-out of thumbnail requests."""

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Iterable, List, Optional, Set

from loguru import logger
from tqdm import tqdm

from vidgroup.config.context import SessionContext, resolve_context
from vidgroup.config.settings import THUMBNAIL_BATCH_SIZE, THUMBNAIL_FILE_SUFFIX
from vidgroup.exceptions import ThumbnailError
from vidgroup.media.thumbnails import extract_thumbnail
from vidgroup.models.thumbnail import ThumbnailOutcome


def _thumbnail_outcome(
    video_path: Path,
    ctx: SessionContext,
    timeout: Optional[float],
) -> ThumbnailOutcome:
    try:
        return ThumbnailOutcome(video_path, thumbnail=extract_thumbnail(video_path, ctx, timeout=timeout))
    except ThumbnailError as e:
        return ThumbnailOutcome(video_path, error=e)


def generate_thumbnails(
    paths: Iterable[Path],
    ctx: Optional[SessionContext] = None,
    batch_size: int = THUMBNAIL_BATCH_SIZE,
    timeout: Optional[float] = None,
    progress: bool = True,
) -> List[ThumbnailOutcome]:
    """
    Extract thumbnails for many videos, batch_size ffmpeg processes at a time.

    A failing video does not stop the others; its error is kept in
    the returned outcome.

    Args:
        paths: Videos to process.
        ctx: Session context.
        batch_size: Maximum number of concurrent ffmpeg processes.
        timeout: Per-video timeout in seconds.
        progress: Show a tqdm progress bar.

    Returns:
        One ThumbnailOutcome per video, in input order.
    """
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")

    ctx = resolve_context(ctx)
    videos = [Path(p) for p in paths]
    if not videos:
        return []

    with ThreadPoolExecutor(max_workers=batch_size) as executor:
        results = executor.map(lambda video: _thumbnail_outcome(video, ctx, timeout), videos)
        outcomes = list(tqdm(
            results,
            total=len(videos),
            desc="Generating thumbnails",
            unit="video",
            disable=not progress,
        ))

    failed = sum(1 for outcome in outcomes if not outcome.ok)
    logger.info(f"Thumbnails generated: {len(outcomes) - failed} ok, {failed} failed")
    return outcomes


def _unique_image_path(output_dir: Path, stem: str, used: Set[str]) -> Path:
    name = f"{stem}{THUMBNAIL_FILE_SUFFIX}"
    counter = 2
    # case-insensitive filesystems would merge "Ep" and "ep"
    while name.lower() in used:
        name = f"{stem}-{counter}{THUMBNAIL_FILE_SUFFIX}"
        counter += 1
    used.add(name.lower())
    return output_dir / name


def save_thumbnails(outcomes: Iterable[ThumbnailOutcome], output_dir: Path) -> List[Path]:
    """
    Write successful thumbnails as <output_dir>/<video stem>.jpg.

    Videos sharing a stem (same name in different folders) get a numeric
    suffix, e.g. ep.jpg then ep-2.jpg, so no image of the batch is lost.

    Args:
        outcomes: Batch results.
        output_dir: Directory receiving the images, created if missing.

    Returns:
        Paths of the written images, one per successful outcome.
    """
    output_dir.mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    used: Set[str] = set()
    for outcome in outcomes:
        if not outcome.ok:
            continue
        image_path = _unique_image_path(output_dir, outcome.source.stem, used)
        image_path.write_bytes(outcome.thumbnail.data)
        logger.debug(f"Thumbnail written: {image_path}")
        written.append(image_path)
    return written
