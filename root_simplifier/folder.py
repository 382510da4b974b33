"""Data model for a classified project folder."""

from dataclasses import dataclass, field, replace
from pathlib import PurePosixPath

from root_simplifier.folder_type import FolderType
from root_simplifier.is_strictly_nested import is_strictly_nested


@dataclass(frozen=True)
class Folder:
    """Represents a directory root declared in the project descriptor."""

    path: PurePosixPath
    folder_type: FolderType
    wants_namespace_prefix: bool = True
    members: frozenset[PurePosixPath] = field(default_factory=frozenset)

    def with_path(self, path: PurePosixPath) -> "Folder":
        """Return a copy of this folder rooted at another path."""
        return replace(self, path=path)

    def with_members(self, members: frozenset[PurePosixPath]) -> "Folder":
        """Return a copy of this folder with a different member set."""
        return replace(self, members=members)

    def merge(self, other: "Folder") -> "Folder":
        """Combine two compatible folders into one rooted at the outer path.

        The folders must share type and namespace prefix flag, and one path
        must contain the other.
        """
        if self.folder_type != other.folder_type:
            msg = f"Cannot merge {self.folder_type} into {other.folder_type}"
            raise ValueError(msg)
        if self.wants_namespace_prefix != other.wants_namespace_prefix:
            msg = f"Namespace prefix flags differ for {self.path} and {other.path}"
            raise ValueError(msg)

        if self.path == other.path or is_strictly_nested(self.path, other.path):
            outer = other.path
        elif is_strictly_nested(other.path, self.path):
            outer = self.path
        else:
            msg = f"{self.path} and {other.path} are not nested"
            raise ValueError(msg)

        return replace(self, path=outer, members=self.members | other.members)
