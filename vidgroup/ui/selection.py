"""User selection and confirmation handling."""

from enum import Enum, auto
from pathlib import Path
from typing import List, Optional

from vidgroup.ui.console import ConsoleUI


class ConfirmationResult(Enum):
    """Result of a user confirmation prompt."""
    ACCEPT = auto()
    REJECT = auto()
    UNKNOWN = auto()


def parse_user_response(response: str) -> ConfirmationResult:
    """
    Parse user response string into a ConfirmationResult.

    Args:
        response: Raw user input string.

    Returns:
        ConfirmationResult enum value.
    """
    response = response.strip().lower()

    if response in ('y', 'yes'):
        return ConfirmationResult.ACCEPT

    if response in ('', 'n', 'no'):
        return ConfirmationResult.REJECT

    return ConfirmationResult.UNKNOWN


def parse_selection(selection: str, count: int) -> Optional[List[int]]:
    """
    Parse a selection such as "3, 1, 5-7" into zero-based indices.

    Numbers are one-based, as displayed. Order is kept as typed, so the
    first number picks the video naming the destination folder.
    Duplicates are dropped.

    Args:
        selection: User input.
        count: Number of selectable videos.

    Returns:
        List of indices, or None if the input is empty or invalid.
    """
    indices: List[int] = []
    for token in selection.replace(" ", "").split(","):
        if not token:
            continue
        try:
            if "-" in token:
                start_text, end_text = token.split("-", 1)
                start, end = int(start_text), int(end_text)
                step = 1 if end >= start else -1
                numbers = range(start, end + step, step)
            else:
                numbers = [int(token)]
        except ValueError:
            return None

        for number in numbers:
            if not 1 <= number <= count:
                return None
            if number - 1 not in indices:
                indices.append(number - 1)

    return indices or None


def prompt_selection(console: ConsoleUI, videos: List[Path]) -> List[Path]:
    """
    Ask the user which videos to move until the answer is valid.

    An empty answer cancels the selection.

    Args:
        console: Console used for prompting.
        videos: Displayed videos, in display order.

    Returns:
        Selected videos in the order given, empty if cancelled.
    """
    while True:
        answer = console.input(
            "[bold cyan]Videos to move[/bold cyan] (e.g. 1,3-5, empty to cancel): "
        )
        if not answer.strip():
            return []
        indices = parse_selection(answer, len(videos))
        if indices is not None:
            return [videos[i] for i in indices]
        console.print_warning(f"Invalid selection: {answer!r}")


def confirm(console: ConsoleUI, question: str) -> bool:
    """
    Ask a yes/no question; anything but an explicit yes is a no.

    Args:
        console: Console used for prompting.
        question: Question text.

    Returns:
        True if the user accepted.
    """
    while True:
        result = parse_user_response(console.input(f"{question} [y/N]: "))
        if result is not ConfirmationResult.UNKNOWN:
            return result is ConfirmationResult.ACCEPT
        console.print_warning("Please answer 'y' or 'n'")
