"""Logic for deciding whether a folder may absorb a nested folder."""

from root_simplifier.errors import InternalConsistencyError
from root_simplifier.folder import Folder
from root_simplifier.is_strictly_nested import is_strictly_nested
from root_simplifier.lookup_path_for import placeholder_file
from root_simplifier.namespace_path_cache import NamespacePathCache


def can_merge(parent: Folder, child: Folder, cache: NamespacePathCache) -> bool:
    """Check whether child can be folded into parent.

    Folders must agree on type and namespace prefix flag. When a prefix is
    wanted, the child's namespace must extend the parent's namespace by exactly
    the directories that separate the two folders.
    """
    if not is_strictly_nested(child.path, parent.path):
        msg = f"{child.path} is not nested under {parent.path}"
        raise InternalConsistencyError(msg)

    if parent.folder_type != child.folder_type:
        return False
    if parent.wants_namespace_prefix != child.wants_namespace_prefix:
        return False
    if not parent.wants_namespace_prefix:
        return True

    parent_namespace = cache.lookup(placeholder_file(parent.path))
    if parent_namespace is None:
        return False
    child_namespace = cache.lookup(placeholder_file(child.path))
    if child_namespace is None:
        return False

    depth = len(child.path.parts) - len(parent.path.parts)
    child_parts = child_namespace.parts
    if depth >= len(child_parts):
        return False
    return child_parts[: len(child_parts) - depth] == parent_namespace.parts
