"""Thumbnail data models."""

import base64
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from vidgroup.config.settings import THUMBNAIL_MIME_TYPE
from vidgroup.exceptions import ThumbnailError


@dataclass(frozen=True)
class Thumbnail:
    """
    One encoded still frame of a video.

    Attributes:
        source: Video the frame was taken from.
        data: Encoded image bytes as written by ffmpeg.
        mime_type: MIME type matching the encoder.
    """

    source: Path
    data: bytes
    mime_type: str = THUMBNAIL_MIME_TYPE

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def data_url(self) -> str:
        """The image as a ``data:`` URL, ready for an <img> tag."""
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"


@dataclass(frozen=True)
class ThumbnailOutcome:
    """Result of one thumbnail request in a batch: a thumbnail or an error."""

    source: Path
    thumbnail: Optional[Thumbnail] = None
    error: Optional[ThumbnailError] = None

    @property
    def ok(self) -> bool:
        return self.thumbnail is not None
