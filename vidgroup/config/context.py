"""Session context passed explicitly to every operation."""

import os
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from vidgroup.config.settings import (
    DEFAULT_DESTINATION_RULE,
    DEFAULT_VIDEO_EXTENSIONS,
    FFMPEG_BINARY,
    FFMPEG_ENV_VAR,
)
from vidgroup.notifications import Notifier, NullNotifier, emit, STATUS, COMPLETE, ERROR


def default_ffmpeg() -> str:
    """Return the ffmpeg executable, honouring the VIDGROUP_FFMPEG override."""
    return os.environ.get(FFMPEG_ENV_VAR) or FFMPEG_BINARY


@dataclass
class SessionContext:
    """
    Runtime settings for one user session.

    There is no global instance: callers build one and hand it to
    scan, thumbnail and move operations.

    Attributes:
        notifier: Sink receiving status, complete and error events.
        dry_run: If True, moves are simulated without touching the disk.
        destination_rule: Name of the rule deriving the destination folder.
        ffmpeg: Executable used for thumbnail extraction.
        extensions: Extensions accepted by the scanner.
    """

    notifier: Notifier = field(default_factory=NullNotifier)
    dry_run: bool = False
    destination_rule: str = DEFAULT_DESTINATION_RULE
    ffmpeg: str = field(default_factory=default_ffmpeg)
    extensions: FrozenSet[str] = DEFAULT_VIDEO_EXTENSIONS

    @property
    def is_simulation(self) -> bool:
        """Alias for dry_run for readability."""
        return self.dry_run

    def status(self, text: str) -> None:
        emit(self.notifier, STATUS, text)

    def complete(self, summary: str) -> None:
        emit(self.notifier, COMPLETE, summary)

    def error(self, text: str) -> None:
        emit(self.notifier, ERROR, text)


def resolve_context(ctx: Optional[SessionContext]) -> SessionContext:
    """Return ctx, or a fresh default context when None."""
    return ctx if ctx is not None else SessionContext()
