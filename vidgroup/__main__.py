"""Entry point for the vidgroup package.

This module provides the command-line entry point for the video grouping tool.
Run with: python -m vidgroup
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional

from loguru import logger

from vidgroup.config import SessionContext, default_ffmpeg
from vidgroup.config.cli import CLIArgs, args_to_cli_args, parse_arguments, validate_directory
from vidgroup.config.settings import LOG_FILE
from vidgroup.exceptions import MoveError, ScanError
from vidgroup.filesystem import move_videos, scan_directory
from vidgroup.models import ThumbnailOutcome
from vidgroup.pipeline import generate_thumbnails, save_thumbnails
from vidgroup.ui import (
    ConsoleNotifier,
    ConsoleUI,
    confirm,
    display_move_summary,
    display_videos,
    prompt_selection,
)


def setup_logging(debug: bool = False) -> None:
    """
    Configure loguru logging.

    Args:
        debug: If True, enable debug-level logging.
    """
    logger.remove()
    level = "DEBUG" if debug else "INFO"
    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    logger.add(
        LOG_FILE,
        rotation="10 MB",
        retention="7 days",
        level="DEBUG",
    )


def build_context(cli_args: CLIArgs, console: ConsoleUI) -> SessionContext:
    """
    Create the session context for one run.

    Events are printed on the console; operations log on their own.

    Args:
        cli_args: Parsed CLI arguments.
        console: Console UI instance.

    Returns:
        SessionContext for the run.
    """
    return SessionContext(
        notifier=ConsoleNotifier(console, dry_run=cli_args.dry_run),
        dry_run=cli_args.dry_run,
        destination_rule=cli_args.rule,
        ffmpeg=cli_args.ffmpeg or default_ffmpeg(),
        extensions=cli_args.extensions,
    )


def _scan(cli_args: CLIArgs, ctx: SessionContext, console: ConsoleUI) -> Optional[List[Path]]:
    if not validate_directory(cli_args.directory):
        console.print_error(f"Invalid directory: {cli_args.directory}")
        return None
    try:
        return scan_directory(cli_args.directory, ctx.extensions)
    except ScanError as e:
        console.print_error(str(e))
        return None


def _thumbnails(
    videos: List[Path],
    cli_args: CLIArgs,
    ctx: SessionContext,
    console: ConsoleUI,
) -> Dict[Path, ThumbnailOutcome]:
    outcomes = generate_thumbnails(
        videos, ctx, batch_size=cli_args.batch_size, timeout=cli_args.timeout
    )
    if cli_args.output_dir is not None:
        written = save_thumbnails(outcomes, cli_args.output_dir)
        console.print_success(f"{len(written)} thumbnails written to {cli_args.output_dir}")
    return {outcome.source: outcome for outcome in outcomes}


def _move(files: List[Path], ctx: SessionContext, console: ConsoleUI) -> int:
    try:
        result = move_videos(files, ctx)
    except MoveError:
        # Already reported through the notifier
        return 1
    display_move_summary(console, result)
    return 0


def run_scan(cli_args: CLIArgs, ctx: SessionContext, console: ConsoleUI) -> int:
    videos = _scan(cli_args, ctx, console)
    if videos is None:
        return 1
    display_videos(console, videos, root=cli_args.directory.resolve())
    return 0


def run_thumbs(cli_args: CLIArgs, ctx: SessionContext, console: ConsoleUI) -> int:
    videos = _scan(cli_args, ctx, console)
    if videos is None:
        return 1
    thumbnails = _thumbnails(videos, cli_args, ctx, console)
    display_videos(console, videos, root=cli_args.directory.resolve(), thumbnails=thumbnails)
    return 0 if all(outcome.ok for outcome in thumbnails.values()) else 1


def run_move(cli_args: CLIArgs, ctx: SessionContext, console: ConsoleUI) -> int:
    return _move([path.absolute() for path in cli_args.files], ctx, console)


def run_select(cli_args: CLIArgs, ctx: SessionContext, console: ConsoleUI) -> int:
    """
    Interactive flow: scan, preview, pick, confirm and move.

    Args:
        cli_args: Parsed CLI arguments.
        ctx: Session context.
        console: Console UI instance.

    Returns:
        Exit code.
    """
    videos = _scan(cli_args, ctx, console)
    if videos is None:
        return 1
    if not videos:
        console.print_warning(f"No video files found in {cli_args.directory}")
        return 0

    thumbnails = None
    if cli_args.output_dir is not None:
        thumbnails = _thumbnails(videos, cli_args, ctx, console)
    display_videos(console, videos, root=cli_args.directory.resolve(), thumbnails=thumbnails)

    selected = prompt_selection(console, videos)
    if not selected:
        console.print_info("Selection cancelled.")
        return 0

    if not cli_args.assume_yes and not confirm(
        console, f"Move {len(selected)} files into a folder named after {selected[0].name}?"
    ):
        console.print_info("Move cancelled.")
        return 0

    return _move(selected, ctx, console)


COMMANDS = {
    "scan": run_scan,
    "thumbs": run_thumbs,
    "move": run_move,
    "select": run_select,
}


def main(args: Optional[List[str]] = None) -> int:
    """
    Main entry point for the video grouping tool.

    Args:
        args: Command-line arguments (None for sys.argv).

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    namespace = parse_arguments(args)
    cli_args = args_to_cli_args(namespace)

    setup_logging(cli_args.debug)
    console = ConsoleUI()

    if cli_args.dry_run:
        console.print_warning(
            "SIMULATION MODE\n\n"
            "• No directory will be created\n"
            "• No file will be moved"
        )

    ctx = build_context(cli_args, console)
    logger.debug(f"Running command '{cli_args.command}'")
    return COMMANDS[cli_args.command](cli_args, ctx, console)


if __name__ == "__main__":
    sys.exit(main())
