"""Data models for video grouping."""

from vidgroup.models.video import MoveRequest, MoveResult, is_video_file
from vidgroup.models.thumbnail import Thumbnail, ThumbnailOutcome

__all__ = [
    "MoveRequest",
    "MoveResult",
    "is_video_file",
    "Thumbnail",
    "ThumbnailOutcome",
]
