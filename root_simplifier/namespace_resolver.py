"""Interface for resolving a file to its logical namespace directory."""

from pathlib import PurePosixPath
from typing import Protocol


class NamespaceResolver(Protocol):
    """Maps a file path to the namespace directory its contents declare.

    Implementations must be deterministic and report failures by returning
    None rather than raising.
    """

    def resolve(self, file_path: PurePosixPath) -> PurePosixPath | None:
        """Return the namespace directory for the file, if it can be found."""
        ...


class IdentityNamespaceResolver:
    """Treats the directory containing a file as its namespace."""

    def resolve(self, file_path: PurePosixPath) -> PurePosixPath | None:
        """Return the file's directory."""
        return file_path.parent
