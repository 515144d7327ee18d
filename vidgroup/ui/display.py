"""Display functions for scan and move output."""

from pathlib import Path
from typing import Dict, List, Optional

from vidgroup.models.thumbnail import ThumbnailOutcome
from vidgroup.models.video import MoveResult
from vidgroup.ui.console import ConsoleUI


def format_size(num_bytes: int) -> str:
    """
    Format a byte count for humans.

    Args:
        num_bytes: Size in bytes.

    Returns:
        String such as "512 B", "1.5 KB" or "3.2 GB".
    """
    if num_bytes < 1024:
        return f"{num_bytes} B"
    size = float(num_bytes)
    for unit in ("KB", "MB", "GB"):
        size /= 1024
        if size < 1024:
            break
    return f"{size:.1f} {unit}"


def _relative_name(path: Path, root: Optional[Path]) -> str:
    if root is None:
        return str(path)
    try:
        return str(path.relative_to(root))
    except ValueError:
        return str(path)


def display_videos(
    console: ConsoleUI,
    videos: List[Path],
    root: Optional[Path] = None,
    thumbnails: Optional[Dict[Path, ThumbnailOutcome]] = None,
) -> None:
    """
    Print a numbered table of videos, numbering from 1.

    Args:
        console: Console to print on.
        videos: Videos in selection order.
        root: Scanned directory; paths are shown relative to it.
        thumbnails: Optional thumbnail outcomes keyed by video path.
    """
    columns = ["#", "Video"]
    if thumbnails is not None:
        columns.append("Thumbnail")
    table = console.create_table(f"{len(videos)} videos", columns)

    for index, video in enumerate(videos, 1):
        row = [str(index), _relative_name(video, root)]
        if thumbnails is not None:
            outcome = thumbnails.get(video)
            if outcome is None:
                row.append("[dim]-[/dim]")
            elif outcome.ok:
                row.append(f"[green]{format_size(outcome.thumbnail.size)}[/green]")
            else:
                row.append(f"[red]{type(outcome.error).__name__}[/red]")
        table.add_row(*row)

    console.print_table(table)


def display_move_summary(console: ConsoleUI, result: MoveResult) -> None:
    """
    Print the destination and the moved files in a panel.

    Args:
        console: Console to print on.
        result: Result of a batch move.
    """
    lines = [f"[bold]Destination:[/bold] [cyan]{result.destination}[/cyan]"]
    lines.extend(f"  • {source.name}" for source, _ in result.moved)
    title = "Simulation" if result.dry_run else "Moved"
    border = "yellow" if result.dry_run else "green"
    console.print_panel("\n".join(lines), title=f"{title} ({result.moved_count})", border_style=border)
