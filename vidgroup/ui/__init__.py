"""User interface components."""

from vidgroup.ui.console import ConsoleUI, ConsoleNotifier
from vidgroup.ui.display import (
    format_size,
    display_videos,
    display_move_summary,
)
from vidgroup.ui.selection import (
    ConfirmationResult,
    parse_user_response,
    parse_selection,
    prompt_selection,
    confirm,
)

__all__ = [
    "ConsoleUI",
    "ConsoleNotifier",
    "format_size",
    "display_videos",
    "display_move_summary",
    "ConfirmationResult",
    "parse_user_response",
    "parse_selection",
    "prompt_selection",
    "confirm",
]
