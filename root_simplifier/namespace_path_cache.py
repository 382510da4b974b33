"""Cache of resolved namespace directories for a single simplification pass."""

import logging
from pathlib import PurePosixPath

from root_simplifier.namespace_resolver import NamespaceResolver
from root_simplifier.parent_dir import parent_dir

logger = logging.getLogger(__name__)


class NamespacePathCache:
    """Maps directories to namespace paths, extrapolating along the tree.

    An entry for ``a/b/c -> x/b/c`` also implies ``a/b -> x/b`` and
    ``a -> x`` for as long as the trailing directory names agree with the
    trailing namespace segments. Lookups for directories without an entry are
    answered from the nearest recorded ancestor.
    """

    def __init__(self) -> None:
        """Initialize an empty cache."""
        self.entries: dict[PurePosixPath, PurePosixPath] = {}
        self.resolved: dict[PurePosixPath, PurePosixPath | None] = {}

    def populate(
        self, file_path: PurePosixPath, resolver: NamespaceResolver
    ) -> PurePosixPath | None:
        """Resolve a file once and record its namespace."""
        if file_path in self.resolved:
            return self.resolved[file_path]
        namespace = resolver.resolve(file_path)
        self.resolved[file_path] = namespace
        if namespace is None:
            logger.debug("No namespace found for %s", file_path)
        else:
            self.insert(file_path, namespace)
        return namespace

    def insert(self, file_path: PurePosixPath, namespace: PurePosixPath) -> None:
        """Record the namespace of the directory containing a file."""
        directory = file_path.parent
        self.entries.setdefault(directory, namespace)
        while namespace.parts and directory.name == namespace.name:
            parent = parent_dir(directory)
            if parent is None:
                break
            directory = parent
            namespace = namespace.parent
            self.entries.setdefault(directory, namespace)

    def lookup(self, file_path: PurePosixPath) -> PurePosixPath | None:
        """Return the namespace of the directory containing a file."""
        directory = file_path.parent
        walked: list[str] = []
        while directory not in self.entries:
            parent = parent_dir(directory)
            if parent is None:
                return None
            walked.append(directory.name)
            directory = parent
        return self.entries[directory].joinpath(*reversed(walked))
