"""State of finalized folders during a simplification pass."""

from pathlib import PurePosixPath

from root_simplifier.errors import InternalConsistencyError
from root_simplifier.folder import Folder


class MergeAccumulator:
    """Tracks the current best folder for every covered path."""

    def __init__(self) -> None:
        """Initialize an empty accumulator."""
        self.folders: dict[PurePosixPath, Folder] = {}

    def register(self, folder: Folder) -> None:
        """Add a folder that no other folder has claimed yet."""
        if folder.path in self.folders:
            msg = f"Duplicate folder path: {folder.path}"
            raise InternalConsistencyError(msg)
        self.folders[folder.path] = folder

    def get(self, path: PurePosixPath) -> Folder | None:
        """Return the folder registered at a path, if any."""
        return self.folders.get(path)

    def replace(self, absorbed: list[Folder], merged: Folder) -> None:
        """Retire absorbed folders and register their merged replacement."""
        for folder in absorbed:
            del self.folders[folder.path]
        self.register(merged)

    def values(self) -> list[Folder]:
        """Return the surviving folders sorted by path."""
        return [self.folders[p] for p in sorted(self.folders)]

    def __contains__(self, path: object) -> bool:
        """Check whether a folder is registered at the path."""
        return path in self.folders

    def __len__(self) -> int:
        """Return the number of registered folders."""
        return len(self.folders)
