"""Batch move of a video selection into a new folder."""

import errno
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from loguru import logger

from vidgroup.config.context import SessionContext, resolve_context
from vidgroup.exceptions import (
    DestinationCreationError,
    EmptyMoveRequestError,
    MoveError,
    MoveFailedError,
    SourceNotFoundError,
)
from vidgroup.filesystem.paths import resolve_destination
from vidgroup.models.video import MoveRequest, MoveResult


def create_destination(destination: Path, ctx: SessionContext) -> None:
    """
    Create the destination directory and any missing parents.

    An existing directory is reused; move_one refuses to replace files
    already in it. Anything else in the way fails.

    Args:
        destination: Directory to create.
        ctx: Session context.

    Raises:
        DestinationCreationError: If the directory cannot be created.
    """
    if ctx.dry_run:
        logger.info(f"SIMULATION - Create directory: {destination}")
        return

    try:
        destination.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DestinationCreationError(destination, e) from e
    logger.info("Output directory created or already exists.")


def move_one(source: Path, destination: Path, dry_run: bool = False) -> Path:
    """
    Rename a single file into destination, keeping its name.

    Args:
        source: File to move.
        destination: Target directory.
        dry_run: If True, only check the source exists.

    Returns:
        New path of the file.

    Raises:
        FileNotFoundError: If dry_run and the source is missing.
        FileExistsError: If a file with the same name is already in destination.
        OSError: If the rename fails.
    """
    target = destination / source.name
    if dry_run and not source.exists():
        raise FileNotFoundError(errno.ENOENT, "No such file or directory", str(source))
    # rename() would silently replace it on POSIX
    if target.exists() or target.is_symlink():
        raise FileExistsError(errno.EEXIST, "Target already exists", str(target))
    if dry_run:
        logger.info(f"SIMULATION - Move: {source} -> {target}")
        return target

    logger.info(f"Attempting to move '{source}' to '{target}'")
    source.rename(target)
    logger.info(f"Successfully moved {source.name}")
    return target


def _move_all(
    request: MoveRequest,
    destination: Path,
    ctx: SessionContext,
) -> List[Tuple[Path, Path]]:
    moved: List[Tuple[Path, Path]] = []
    ctx.status("Starting file move process...")
    for source in request:
        target = destination / source.name
        ctx.status(f"Moving {source.name}...")
        try:
            move_one(source, destination, ctx.dry_run)
        except OSError as e:
            if not source.exists():
                raise SourceNotFoundError(source, moved) from e
            raise MoveFailedError(source, target, e, moved) from e
        moved.append((source, target))
    return moved


def move_videos(
    paths: Union[MoveRequest, Iterable[Union[str, Path]]],
    ctx: Optional[SessionContext] = None,
) -> MoveResult:
    """
    Move files into a new folder named after the first one.

    Files are moved one by one, in order. The batch stops at the first
    failure: files already moved stay moved, later files are untouched.

    Args:
        paths: Files to move; the first one names the destination.
        ctx: Session context holding the notifier and options.

    Returns:
        MoveResult with the destination and the moves performed.

    Raises:
        EmptyMoveRequestError: If no file was given.
        DestinationCreationError: If the folder cannot be created.
        SourceNotFoundError: If a file vanished before being moved.
        MoveFailedError: If a rename failed for another reason.
    """
    ctx = resolve_context(ctx)
    try:
        request = paths if isinstance(paths, MoveRequest) else MoveRequest.of(paths)
    except EmptyMoveRequestError as e:
        ctx.status("Received request to move 0 files.")
        logger.error(str(e))
        ctx.error(str(e))
        raise

    logger.info(f"move_videos called with {len(request)} files.")
    ctx.status(f"Received request to move {len(request)} files.")

    try:
        destination = resolve_destination(request.first, ctx.destination_rule)
        logger.info(f"Target output directory for moved files: {destination}")
        ctx.status(f"Target directory: {destination}")

        create_destination(destination, ctx)
        if ctx.dry_run:
            ctx.status("Output directory would be created.")
        else:
            ctx.status("Output directory created.")

        moved = _move_all(request, destination, ctx)
    except MoveFailedError as e:
        logger.error(str(e))
        ctx.error(e.hint)
        raise
    except (MoveError, ValueError) as e:
        logger.error(str(e))
        ctx.error(str(e))
        raise

    result = MoveResult(destination=destination, moved=moved, dry_run=ctx.dry_run)
    logger.info(result.summary)
    ctx.complete(result.summary)
    return result
