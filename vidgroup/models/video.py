"""Video and move request data models."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from vidgroup.exceptions import EmptyMoveRequestError

PathLike = Union[str, Path]


def is_video_file(path: Path, extensions: Iterable[str]) -> bool:
    """
    Check whether a path carries one of the accepted extensions.

    Args:
        path: File path to check.
        extensions: Lowercase extensions including the leading dot.

    Returns:
        True if the lowercase suffix is in extensions.
    """
    return path.suffix.lower() in extensions


@dataclass(frozen=True)
class MoveRequest:
    """
    Ordered, non-empty list of files to move in one batch.

    Only the first file matters for naming the destination folder.
    """

    paths: Tuple[Path, ...]

    def __post_init__(self) -> None:
        if not self.paths:
            raise EmptyMoveRequestError()

    @classmethod
    def of(cls, paths: Iterable[PathLike]) -> "MoveRequest":
        """Build a request from any iterable of str or Path."""
        return cls(tuple(Path(p) for p in paths))

    @property
    def first(self) -> Path:
        return self.paths[0]

    def __len__(self) -> int:
        return len(self.paths)

    def __iter__(self):
        return iter(self.paths)


@dataclass
class MoveResult:
    """
    Outcome of a successful batch move.

    Attributes:
        destination: Folder that received the files.
        moved: (source, target) pairs in move order.
        dry_run: True if nothing was actually moved.
    """

    destination: Path
    moved: List[Tuple[Path, Path]] = field(default_factory=list)
    dry_run: bool = False

    @property
    def moved_count(self) -> int:
        return len(self.moved)

    @property
    def summary(self) -> str:
        """Human readable summary line."""
        if self.dry_run:
            return f"SIMULATION - Would move {self.moved_count} files to {self.destination}"
        return f"Successfully moved {self.moved_count} files to {self.destination}"
