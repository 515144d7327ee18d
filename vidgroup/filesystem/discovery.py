"""File discovery functions for finding video files."""

import os
from pathlib import Path
from typing import FrozenSet, Iterable, List, Set, Tuple

from loguru import logger

from vidgroup.config.settings import DEFAULT_VIDEO_EXTENSIONS
from vidgroup.exceptions import ScanError
from vidgroup.models.video import is_video_file


def normalize_extensions(extensions: Iterable[str]) -> FrozenSet[str]:
    """
    Normalize an extension allow-list to lowercase with a leading dot.

    Args:
        extensions: Extensions such as "m4v", ".MP4".

    Returns:
        Frozen set of normalized extensions, e.g. {".m4v", ".mp4"}.
    """
    normalized = set()
    for ext in extensions:
        ext = ext.strip().lower()
        if not ext:
            continue
        if not ext.startswith("."):
            ext = "." + ext
        normalized.add(ext)
    return frozenset(normalized)


def _raise_scan_error(error: OSError) -> None:
    raise error


def scan_directory(
    root: Path,
    extensions: Iterable[str] = DEFAULT_VIDEO_EXTENSIONS,
    follow_symlinks: bool = False,
) -> List[Path]:
    """
    Return every video file under root, recursively.

    Depth-first: a directory's files in lexical order, then its
    subdirectories in lexical order. The scan is
    all-or-nothing: one unreadable directory aborts it.

    Args:
        root: Directory to scan.
        extensions: Accepted extensions (case-insensitive).
        follow_symlinks: Descend into symlinked directories. Directories
            already visited are skipped so link cycles terminate.

    Returns:
        Absolute paths of matching files, empty if none.

    Raises:
        ScanError: If root or any directory below it cannot be read.
    """
    allowed = normalize_extensions(extensions)
    root = Path(os.path.abspath(root))
    logger.debug(f"Scanning: {root}")

    videos: List[Path] = []
    visited: Set[Tuple[int, int]] = set()
    try:
        for dirpath, dirnames, filenames in os.walk(
            root, onerror=_raise_scan_error, followlinks=follow_symlinks
        ):
            if follow_symlinks:
                st = os.stat(dirpath)
                key = (st.st_dev, st.st_ino)
                if key in visited:
                    logger.debug(f"Directory already visited, skipping: {dirpath}")
                    dirnames[:] = []
                    continue
                visited.add(key)

            dirnames.sort()
            for name in sorted(filenames):
                if is_video_file(Path(name), allowed):
                    videos.append(Path(dirpath) / name)
    except OSError as e:
        logger.error(f"Error scanning directory {root}: {e}")
        raise ScanError(root, e) from e

    logger.info(f"Found {len(videos)} video files in {root}")
    return videos


def count_videos(
    root: Path,
    extensions: Iterable[str] = DEFAULT_VIDEO_EXTENSIONS,
) -> int:
    """
    Count video files under root.

    Args:
        root: Directory to count files in.
        extensions: Accepted extensions.

    Returns:
        Number of matching files.

    Raises:
        ScanError: If the tree cannot be read.
    """
    return len(scan_directory(root, extensions))
