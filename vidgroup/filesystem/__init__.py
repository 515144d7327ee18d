"""Filesystem operations for video grouping."""

from vidgroup.filesystem.discovery import (
    normalize_extensions,
    scan_directory,
    count_videos,
)
from vidgroup.filesystem.paths import (
    DestinationRule,
    resolve_destination,
)
from vidgroup.filesystem.file_ops import (
    create_destination,
    move_one,
    move_videos,
)

__all__ = [
    "normalize_extensions",
    "scan_directory",
    "count_videos",
    "DestinationRule",
    "resolve_destination",
    "create_destination",
    "move_one",
    "move_videos",
]
