"""Destination folder naming rules."""

from enum import Enum
from pathlib import Path
from typing import Union


class DestinationRule(Enum):
    """How the destination folder is derived from the first file of a move."""

    # /videos/show/ep1.m4v -> /videos/show/ep1
    STEM = "stem"
    # /videos/show/ep1.m4v -> /videos/show/ep1_m4v
    UNDERSCORE = "underscore"
    # /videos/show/ep1.m4v -> /videos/ep1
    GRANDPARENT = "grandparent"


def resolve_destination(
    first_path: Path,
    rule: Union[DestinationRule, str] = DestinationRule.STEM,
) -> Path:
    """
    Compute the destination folder for a move request.

    Args:
        first_path: First file of the request.
        rule: Naming rule, as an enum member or its value.

    Returns:
        Destination directory path.

    Raises:
        ValueError: If the rule is unknown or the path has no file name.
    """
    rule = DestinationRule(rule)
    if not first_path.name:
        raise ValueError(f"Cannot derive a folder name from '{first_path}'")

    if rule is DestinationRule.UNDERSCORE:
        # Every dot of the whole path is replaced, not only the extension one
        return Path(str(first_path).replace(".", "_"))

    stem = first_path.stem
    if rule is DestinationRule.GRANDPARENT:
        return first_path.parent.parent / stem
    return first_path.parent / stem
