"""Tests for the folder compatibility check."""

from pathlib import PurePosixPath

import pytest

from root_simplifier.can_merge import can_merge
from root_simplifier.errors import InternalConsistencyError
from root_simplifier.folder import Folder
from root_simplifier.folder_type import FolderType
from root_simplifier.namespace_path_cache import NamespacePathCache


def folder(
    path: str, folder_type: FolderType = FolderType.SOURCE, *, prefix: bool = True
) -> Folder:
    """Create a folder without members."""
    return Folder(PurePosixPath(path), folder_type, prefix)


def cache_with(entries: dict[str, str]) -> NamespacePathCache:
    """Create a cache holding the given directory -> namespace entries."""
    cache = NamespacePathCache()
    for directory, namespace in entries.items():
        cache.insert(PurePosixPath(directory) / "notfound", PurePosixPath(namespace))
    return cache


def test_matching_namespace_hierarchy_merges() -> None:
    """Verify that a namespace mirroring the directory nesting is mergeable."""
    cache = cache_with({"src/com/foo": "com/foo"})
    assert can_merge(folder("src/com"), folder("src/com/foo"), cache)


def test_types_must_match() -> None:
    """Verify that different folder types are never mergeable."""
    cache = cache_with({"src/a": "src/a"})
    assert not can_merge(folder("src"), folder("src/a", FolderType.TEST), cache)


def test_prefix_flags_must_match() -> None:
    """Verify that prefix and prefixless folders are never mergeable."""
    cache = cache_with({"src/a": "src/a"})
    assert not can_merge(folder("src"), folder("src/a", prefix=False), cache)
    assert not can_merge(folder("src", prefix=False), folder("src/a"), cache)


def test_prefixless_folders_ignore_namespaces() -> None:
    """Verify that prefixless folders merge on structure alone."""
    empty = NamespacePathCache()
    assert can_merge(folder("a", prefix=False), folder("a/b/c", prefix=False), empty)


def test_parent_without_namespace_blocks() -> None:
    """Verify that an unknown parent namespace blocks the merge."""
    cache = cache_with({"src/left": "onething"})
    assert not can_merge(folder("src"), folder("src/left"), cache)


def test_child_without_namespace_blocks() -> None:
    """Verify that an unknown child namespace blocks the merge."""
    assert not can_merge(folder("src"), folder("src/a"), NamespacePathCache())


def test_namespace_too_short_blocks() -> None:
    """Verify that the namespace must be deeper than the merge distance."""
    cache = cache_with({"x/a/a": "a/a"})
    assert can_merge(folder("x/a"), folder("x/a/a"), cache)
    # Two levels above a/a no namespace segment is left.
    assert not can_merge(folder("x"), folder("x/a/a"), cache)


def test_namespace_must_mirror_directories() -> None:
    """Verify that the trimmed child namespace must equal the parent's."""
    cache = cache_with({"src/a": "com/b", "src": "org"})
    assert not can_merge(folder("src"), folder("src/a"), cache)


def test_non_nested_folders_are_rejected() -> None:
    """Verify that calling the check on unrelated paths fails fast."""
    with pytest.raises(InternalConsistencyError):
        can_merge(folder("src/a"), folder("src/b"), NamespacePathCache())
    with pytest.raises(InternalConsistencyError):
        can_merge(folder("src"), folder("src"), NamespacePathCache())
