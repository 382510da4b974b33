"""Utility for stepping one level up a directory path."""

from pathlib import PurePosixPath


def parent_dir(path: PurePosixPath) -> PurePosixPath | None:
    """Return the parent directory, or None when the path has no parent."""
    # "/" and "src" both stop here; "src".parent would otherwise be ".".
    if len(path.parts) <= 1:
        return None
    return path.parent
