"""Configuration and session context."""

from vidgroup.config.settings import (
    DEFAULT_VIDEO_EXTENSIONS,
    DEFAULT_DESTINATION_RULE,
    FFMPEG_BINARY,
    FFMPEG_ENV_VAR,
    THUMBNAIL_SEEK_OFFSET,
    THUMBNAIL_MIME_TYPE,
    THUMBNAIL_BATCH_SIZE,
)
from vidgroup.config.context import (
    SessionContext,
    default_ffmpeg,
    resolve_context,
)

__all__ = [
    "DEFAULT_VIDEO_EXTENSIONS",
    "DEFAULT_DESTINATION_RULE",
    "FFMPEG_BINARY",
    "FFMPEG_ENV_VAR",
    "THUMBNAIL_SEEK_OFFSET",
    "THUMBNAIL_MIME_TYPE",
    "THUMBNAIL_BATCH_SIZE",
    "SessionContext",
    "default_ffmpeg",
    "resolve_context",
]
