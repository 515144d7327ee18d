"""Custom exceptions for scan, thumbnail and move errors."""

from pathlib import Path
from typing import List, Optional, Tuple


class VidgroupError(Exception):
    """Base class for all vidgroup errors."""

    pass


class ScanError(VidgroupError):
    """A directory could not be read while scanning; no results are returned."""

    def __init__(self, root: Path, cause: OSError):
        self.root = root
        self.cause = cause
        location = getattr(cause, "filename", None) or root
        super().__init__(f"Error scanning directory '{root}' at '{location}': {cause}")


class MoveError(VidgroupError):
    """Base class for batch move errors."""

    pass


class EmptyMoveRequestError(MoveError):
    """The move request contained no files."""

    def __init__(self, message: str = "no video files provided to move"):
        super().__init__(message)


class DestinationCreationError(MoveError):
    """The destination directory could not be created. No file was moved."""

    def __init__(self, destination: Path, cause: OSError):
        self.destination = destination
        self.cause = cause
        super().__init__(f"failed to create output directory '{destination}': {cause}")


class _PartialMoveError(MoveError):
    """Move halted part-way; carries the moves that already happened."""

    def __init__(
        self,
        message: str,
        source: Path,
        moved: Optional[List[Tuple[Path, Path]]] = None,
    ):
        self.source = source
        self.moved = list(moved or [])
        super().__init__(message)

    @property
    def moved_count(self) -> int:
        """Number of files moved before the failure."""
        return len(self.moved)


class SourceNotFoundError(_PartialMoveError):
    """A file of the request vanished before it could be moved."""

    def __init__(self, source: Path, moved: Optional[List[Tuple[Path, Path]]] = None):
        super().__init__(
            f"Failed to move file '{source.name}': Source file not found.",
            source,
            moved,
        )


class MoveFailedError(_PartialMoveError):
    """A rename failed for a reason other than a missing source."""

    HINT = "Might be cross-drive issue or permissions."
    TARGET_EXISTS_HINT = "A file with the same name is already in the destination."

    def __init__(
        self,
        source: Path,
        target: Path,
        cause: OSError,
        moved: Optional[List[Tuple[Path, Path]]] = None,
    ):
        self.target = target
        self.cause = cause
        super().__init__(
            f"Failed to move file '{source.name}' to '{target}': {cause}",
            source,
            moved,
        )

    @property
    def hint(self) -> str:
        if isinstance(self.cause, FileExistsError):
            return f"{self}. {self.TARGET_EXISTS_HINT}"
        return f"{self}. {self.HINT}"


class ThumbnailError(VidgroupError):
    """Base class for thumbnail extraction errors."""

    def __init__(self, video_path: Path, message: str):
        self.video_path = video_path
        super().__init__(message)


class ThumbnailToolError(ThumbnailError):
    """ffmpeg could not be run or exited with a non-zero status."""

    def __init__(
        self,
        video_path: Path,
        message: str,
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(video_path, message)


class ThumbnailToolNotFoundError(ThumbnailToolError):
    """The ffmpeg executable is not installed or not on PATH."""

    def __init__(self, video_path: Path, tool: str):
        self.tool = tool
        super().__init__(video_path, f"Missing command: {tool}")


class ThumbnailNoDataError(ThumbnailError):
    """ffmpeg succeeded but wrote no image (video shorter than the seek offset?)."""

    def __init__(self, video_path: Path, stderr: str = ""):
        self.stderr = stderr
        super().__init__(video_path, f"ffmpeg produced no thumbnail data for video: {video_path}")


class ThumbnailTimeoutError(ThumbnailError):
    """ffmpeg did not finish within the caller supplied timeout."""

    def __init__(self, video_path: Path, timeout: float):
        self.timeout = timeout
        super().__init__(video_path, f"ffmpeg timed out after {timeout}s for {video_path}")
