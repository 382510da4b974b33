"""Bottom-up merging of folders along the ancestry graph."""

import logging
from pathlib import PurePosixPath

from root_simplifier.ancestry_graph import AncestryGraph
from root_simplifier.can_merge import can_merge
from root_simplifier.errors import InternalConsistencyError
from root_simplifier.folder import Folder
from root_simplifier.merge_accumulator import MergeAccumulator
from root_simplifier.merge_result import BLOCKED, Blocked, Merged, MergeResult
from root_simplifier.namespace_path_cache import NamespacePathCache

logger = logging.getLogger(__name__)


def walk(
    root: PurePosixPath,
    graph: AncestryGraph,
    accumulator: MergeAccumulator,
    cache: NamespacePathCache,
) -> MergeResult:
    """Merge the subtree below root as far up as the folders allow.

    Children are always evaluated before their parent. The accumulator is
    updated in place as nodes merge, so whatever was merged below a blocked
    node is kept.
    """
    results: dict[PurePosixPath, MergeResult] = {}
    stack: list[tuple[PurePosixPath, bool]] = [(root, False)]

    while stack:
        node, children_done = stack.pop()
        if not children_done:
            stack.append((node, True))
            for child in reversed(graph.children(node)):
                stack.append((child, False))
            continue

        child_results = [results.pop(child) for child in graph.children(node)]
        results[node] = _merge_node(node, child_results, accumulator, cache)

    return results[root]


def _merge_node(
    node: PurePosixPath,
    child_results: list[MergeResult],
    accumulator: MergeAccumulator,
    cache: NamespacePathCache,
) -> MergeResult:
    """Decide the outcome for one node given the outcomes of its children."""
    if any(isinstance(r, Blocked) for r in child_results):
        return BLOCKED

    children: list[Folder] = [r.folder for r in child_results if isinstance(r, Merged)]
    if not children:
        folder = accumulator.get(node)
        if folder is None:
            msg = f"Leaf {node} has no registered folder"
            raise InternalConsistencyError(msg)
        return Merged(folder)

    if node in accumulator:
        msg = f"Folder {node} has nested folders below it"
        raise InternalConsistencyError(msg)

    # Every child is checked against a template built from the first child,
    # not against each other.
    candidate = children[0].with_path(node).with_members(frozenset())
    if not all(can_merge(candidate, child, cache) for child in children):
        logger.debug("Stopped merging at %s", node)
        return BLOCKED

    merged = candidate
    for child in children:
        merged = child.merge(merged)
    accumulator.replace(children, merged)
    logger.debug("Merged %d folder(s) into %s", len(children), node)
    return Merged(merged)
