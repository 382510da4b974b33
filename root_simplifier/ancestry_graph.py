"""Logic for building the directory ancestry graph over folder paths."""

from collections.abc import Iterable
from pathlib import PurePosixPath

from root_simplifier.parent_dir import parent_dir


class AncestryGraph:
    """Directed parent -> child containment graph over directory paths."""

    def __init__(self) -> None:
        """Initialize an empty graph."""
        self.edges: dict[PurePosixPath, set[PurePosixPath]] = {}
        self.has_parent: set[PurePosixPath] = set()

    def add_node(self, node: PurePosixPath) -> None:
        """Register a node without any edges."""
        self.edges.setdefault(node, set())

    def add_edge(self, parent: PurePosixPath, child: PurePosixPath) -> None:
        """Connect parent to child; repeated edges are ignored."""
        self.add_node(parent)
        self.add_node(child)
        self.edges[parent].add(child)
        self.has_parent.add(child)

    def children(self, node: PurePosixPath) -> list[PurePosixPath]:
        """Return the direct children of a node in sorted order."""
        return sorted(self.edges.get(node, ()))

    def roots(self) -> list[PurePosixPath]:
        """Return the nodes with no incoming edge in sorted order."""
        return sorted(n for n in self.edges if n not in self.has_parent)

    def __contains__(self, node: object) -> bool:
        """Check whether the node is part of the graph."""
        return node in self.edges

    def __len__(self) -> int:
        """Return the number of nodes."""
        return len(self.edges)


def build_ancestry_graph(paths: Iterable[PurePosixPath]) -> AncestryGraph:
    """Build a graph linking every path to each of its ancestors."""
    graph = AncestryGraph()
    for path in paths:
        graph.add_node(path)
        current = path
        parent = parent_dir(current)
        while parent is not None:
            if current in graph.has_parent:
                # The rest of this chain was added by an earlier path.
                break
            graph.add_edge(parent, current)
            current = parent
            parent = parent_dir(current)
    return graph
