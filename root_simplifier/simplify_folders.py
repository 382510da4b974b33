"""Entry point for collapsing folders into the smallest equivalent set."""

import logging
from collections.abc import Iterable
from pathlib import PurePosixPath

from root_simplifier.ancestry_graph import build_ancestry_graph
from root_simplifier.errors import InternalConsistencyError
from root_simplifier.folder import Folder
from root_simplifier.folder_type import FolderType
from root_simplifier.lookup_path_for import lookup_path_for
from root_simplifier.merge_accumulator import MergeAccumulator
from root_simplifier.merge_engine import walk
from root_simplifier.namespace_path_cache import NamespacePathCache
from root_simplifier.namespace_resolver import NamespaceResolver

logger = logging.getLogger(__name__)


def simplify_folders(
    folders: Iterable[Folder], resolver: NamespaceResolver
) -> list[Folder]:
    """Merge folders upward wherever type, flag and namespace agree.

    Excluded folders are returned untouched and first, in input order; the
    remaining folders follow sorted by path.
    """
    excluded: list[Folder] = []
    accumulator = MergeAccumulator()
    cache = NamespacePathCache()
    seen: set[PurePosixPath] = set()

    for folder in folders:
        if folder.path in seen:
            msg = f"Duplicate folder path: {folder.path}"
            raise InternalConsistencyError(msg)
        seen.add(folder.path)

        if folder.folder_type == FolderType.EXCLUDE:
            # Excludes are assumed to already sit at the highest useful level.
            excluded.append(folder)
            continue

        if folder.wants_namespace_prefix:
            cache.populate(lookup_path_for(folder), resolver)
        accumulator.register(folder)

    graph = build_ancestry_graph(list(accumulator.folders))
    for root in graph.roots():
        walk(root, graph, accumulator, cache)

    result = excluded + accumulator.values()
    logger.debug("Simplified %d folder(s) into %d", len(seen), len(result))
    return result
