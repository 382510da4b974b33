"""Utility for choosing the file used to look up a folder's namespace."""

from pathlib import PurePosixPath

from root_simplifier.folder import Folder

PLACEHOLDER_FILE_NAME = "notfound"


def lookup_path_for(folder: Folder) -> PurePosixPath:
    """Pick the representative file for namespace resolution of a folder."""
    if folder.members:
        return min(folder.members)
    return placeholder_file(folder.path)


def placeholder_file(directory: PurePosixPath) -> PurePosixPath:
    """Return a file path directly inside the directory."""
    return directory / PLACEHOLDER_FILE_NAME
