"""Command-line interface argument parsing."""

import argparse
from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, List, Optional

from loguru import logger

from vidgroup.config.settings import (
    DEFAULT_DESTINATION_RULE,
    DEFAULT_VIDEO_EXTENSIONS,
    THUMBNAIL_BATCH_SIZE,
)
from vidgroup.filesystem.paths import DestinationRule
from vidgroup.filesystem.discovery import normalize_extensions


@dataclass
class CLIArgs:
    """
    Parsed command-line arguments.

    Attributes:
        command: Sub-command to run (scan, thumbs, move, select).
        directory: Directory to scan (scan, thumbs, select).
        files: Files to move (move).
        output_dir: Where thumbnails are written (thumbs, select).
        dry_run: If True, simulate moves without making changes.
        debug: If True, enable debug logging.
        rule: Destination naming rule.
        ffmpeg: ffmpeg executable override.
        extensions: Extensions accepted by the scanner.
        batch_size: Number of concurrent ffmpeg processes.
        timeout: Per-thumbnail timeout in seconds (None for no limit).
        assume_yes: Skip the confirmation prompt before moving.
    """

    command: str = "scan"
    directory: Optional[Path] = None
    files: List[Path] = field(default_factory=list)
    output_dir: Optional[Path] = None
    dry_run: bool = False
    debug: bool = False
    rule: str = DEFAULT_DESTINATION_RULE
    ffmpeg: Optional[str] = None
    extensions: FrozenSet[str] = DEFAULT_VIDEO_EXTENSIONS
    batch_size: int = THUMBNAIL_BATCH_SIZE
    timeout: Optional[float] = None
    assume_yes: bool = False


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--debug',
        action='store_true',
        help="enable debug logging"
    )
    parser.add_argument(
        '--ext',
        action='append',
        default=None,
        metavar='EXT',
        help=f"video extension to look for, repeatable (default: {', '.join(sorted(DEFAULT_VIDEO_EXTENSIONS))})"
    )
    parser.add_argument(
        '--ffmpeg',
        default=None,
        help="ffmpeg executable (default: $VIDGROUP_FFMPEG or 'ffmpeg')"
    )


def _add_move_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help="simulation mode - no file modifications"
    )
    parser.add_argument(
        '--rule',
        choices=[rule.value for rule in DestinationRule],
        default=DEFAULT_DESTINATION_RULE,
        help=f"destination folder naming rule (default: {DEFAULT_DESTINATION_RULE})"
    )


def _add_thumbnail_arguments(parser: argparse.ArgumentParser, required: bool) -> None:
    parser.add_argument(
        '-o', '--output',
        required=required,
        default=None,
        help="directory receiving the extracted thumbnails"
    )
    parser.add_argument(
        '-j', '--batch-size',
        type=int,
        default=THUMBNAIL_BATCH_SIZE,
        help=f"number of thumbnails extracted at once (default: {THUMBNAIL_BATCH_SIZE})"
    )
    parser.add_argument(
        '--timeout',
        type=float,
        default=None,
        help="give up on a thumbnail after TIMEOUT seconds"
    )


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance.
    """
    parser = argparse.ArgumentParser(
        prog='vidgroup',
        description="""
        Scans a directory for video files, previews them with thumbnails
        and moves a selection into a folder named after the first video.
        """
    )
    subparsers = parser.add_subparsers(dest='command', required=True)

    scan = subparsers.add_parser('scan', help="list video files under DIRECTORY")
    scan.add_argument('directory', help="directory to scan")
    _add_common_arguments(scan)

    thumbs = subparsers.add_parser('thumbs', help="extract a thumbnail for every video")
    thumbs.add_argument('directory', help="directory to scan")
    _add_thumbnail_arguments(thumbs, required=True)
    _add_common_arguments(thumbs)

    move = subparsers.add_parser('move', help="move FILES into a folder named after the first")
    move.add_argument('files', nargs='+', help="video files to move, first one names the folder")
    _add_move_arguments(move)
    _add_common_arguments(move)

    select = subparsers.add_parser('select', help="scan, pick videos interactively and move them")
    select.add_argument('directory', help="directory to scan")
    select.add_argument(
        '-y', '--yes',
        action='store_true',
        help="do not ask for confirmation before moving"
    )
    _add_thumbnail_arguments(select, required=False)
    _add_move_arguments(select)
    _add_common_arguments(select)

    return parser


def parse_arguments(args: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Args:
        args: List of argument strings (None for sys.argv).

    Returns:
        Parsed Namespace object.
    """
    parser = create_parser()
    return parser.parse_args(args)


def validate_directory(directory: Path) -> bool:
    """
    Check that a directory given on the command line exists.

    Args:
        directory: Directory to check.

    Returns:
        True if it exists and is a directory, False otherwise.
    """
    if not directory.exists():
        logger.error(f"Directory {directory} does not exist")
        return False
    if not directory.is_dir():
        logger.error(f"{directory} is not a directory")
        return False
    return True


def args_to_cli_args(namespace: argparse.Namespace) -> CLIArgs:
    """
    Convert argparse Namespace to CLIArgs dataclass.

    Args:
        namespace: Parsed argparse Namespace.

    Returns:
        CLIArgs instance.
    """
    directory = getattr(namespace, 'directory', None)
    output = getattr(namespace, 'output', None)
    extensions = (
        normalize_extensions(namespace.ext) if namespace.ext else DEFAULT_VIDEO_EXTENSIONS
    )

    return CLIArgs(
        command=namespace.command,
        directory=Path(directory).expanduser() if directory else None,
        files=[Path(f).expanduser() for f in getattr(namespace, 'files', None) or []],
        output_dir=Path(output).expanduser() if output else None,
        dry_run=getattr(namespace, 'dry_run', False),
        debug=namespace.debug,
        rule=getattr(namespace, 'rule', DEFAULT_DESTINATION_RULE),
        ffmpeg=namespace.ffmpeg,
        extensions=extensions,
        batch_size=max(1, getattr(namespace, 'batch_size', THUMBNAIL_BATCH_SIZE)),
        timeout=getattr(namespace, 'timeout', None),
        assume_yes=getattr(namespace, 'yes', False),
    )
