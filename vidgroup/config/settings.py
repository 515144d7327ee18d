"""Configuration settings and constants for the vidgroup package."""

from typing import FrozenSet

# Video file extensions picked up by the scanner
DEFAULT_VIDEO_EXTENSIONS: FrozenSet[str] = frozenset({".m4v"})

# External media tool
FFMPEG_BINARY: str = "ffmpeg"
FFMPEG_ENV_VAR: str = "VIDGROUP_FFMPEG"

# Thumbnail extraction
THUMBNAIL_SEEK_OFFSET: str = "00:00:01"
THUMBNAIL_FRAME_COUNT: int = 1
THUMBNAIL_CODEC: str = "mjpeg"
THUMBNAIL_MIME_TYPE: str = "image/jpeg"
THUMBNAIL_FILE_SUFFIX: str = ".jpg"

# Number of ffmpeg processes allowed to run at the same time
THUMBNAIL_BATCH_SIZE: int = 2

# Naming rule used to derive the destination folder of a move
DEFAULT_DESTINATION_RULE: str = "stem"

# Log file written next to the working directory
LOG_FILE: str = "vidgroup.log"
