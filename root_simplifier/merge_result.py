"""Outcome of evaluating one node of the ancestry graph."""

from dataclasses import dataclass

from root_simplifier.folder import Folder


@dataclass(frozen=True)
class Merged:
    """The node is covered by a single folder."""

    folder: Folder


@dataclass(frozen=True)
class Blocked:
    """Merging must stop below this node.

    Folders already committed for the node's descendants stay as they are.
    """


BLOCKED = Blocked()

MergeResult = Merged | Blocked
