"""Utility for checking directory containment."""

from pathlib import PurePosixPath


def is_strictly_nested(child: PurePosixPath, parent: PurePosixPath) -> bool:
    """Check whether child lies below parent (and is not parent itself)."""
    return len(child.parts) > len(parent.parts) and child.is_relative_to(parent)
