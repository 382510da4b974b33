"""Namespace resolution based on the position of a file in the source tree."""

from collections.abc import Iterable
from pathlib import PurePosixPath


class PrefixNamespaceResolver:
    """Derives namespaces from well-known source root prefixes and names.

    ``path_prefixes`` are directories whose contents are namespaced from their
    top (``java/`` makes ``java/com/foo/A.java`` live in ``com/foo``).
    ``path_elements`` are directory names that start a namespace wherever they
    occur (``src`` makes ``lib/src/com/foo/A.java`` live in ``com/foo``).
    """

    def __init__(
        self,
        path_prefixes: Iterable[str] = (),
        path_elements: Iterable[str] = (),
    ) -> None:
        """Initialize with configured prefixes and path elements."""
        prefixes = {PurePosixPath(p) for p in path_prefixes if p.strip("/")}
        # Longest prefix wins.
        self.path_prefixes = sorted(prefixes, key=lambda p: (-len(p.parts), str(p)))
        self.path_elements = set(path_elements)

    def resolve(self, file_path: PurePosixPath) -> PurePosixPath | None:
        """Return the namespace directory for a file."""
        directory = file_path.parent
        for prefix in self.path_prefixes:
            if directory.is_relative_to(prefix):
                return directory.relative_to(prefix)

        parts = directory.parts
        for i in range(len(parts) - 1, -1, -1):
            if parts[i] in self.path_elements:
                return PurePosixPath(*parts[i + 1 :])

        return directory
