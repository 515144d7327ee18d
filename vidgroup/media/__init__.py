"""Media tool integration."""

from vidgroup.media.thumbnails import build_ffmpeg_command, extract_thumbnail

__all__ = [
    "build_ffmpeg_command",
    "extract_thumbnail",
]
