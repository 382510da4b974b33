"""Logic for reading folder listings and writing simplified folders."""

from collections.abc import Iterable
from pathlib import Path, PurePosixPath
from typing import Any

import yaml

from root_simplifier.errors import FolderListingError
from root_simplifier.folder import Folder
from root_simplifier.folder_type import FolderType


def load_folder_listing(path: Path) -> list[Folder]:
    """Load the folders declared in a YAML listing file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        msg = f"Could not read {path}: {e}"
        raise FolderListingError(msg) from e
    try:
        doc = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        msg = f"Invalid YAML in {path}: {e}"
        raise FolderListingError(msg) from e

    entries = doc.get("folders") if isinstance(doc, dict) else None
    if not isinstance(entries, list):
        msg = f"{path} must contain a 'folders' list"
        raise FolderListingError(msg)
    folders = [folder_from_record(entry) for entry in entries]
    check_folder_paths(folders)
    return folders


def check_folder_paths(folders: list[Folder]) -> None:
    """Reject repeated paths and folders declared inside other folders.

    Excluded folders may nest inside any folder; they are never merged.
    """
    seen: set[PurePosixPath] = set()
    for folder in folders:
        if folder.path in seen:
            msg = f"Folder {folder.path} is listed more than once"
            raise FolderListingError(msg)
        seen.add(folder.path)

    merged_paths = {f.path for f in folders if f.folder_type != FolderType.EXCLUDE}
    for path in sorted(merged_paths):
        for ancestor in path.parents:
            if ancestor in merged_paths:
                msg = f"Folder {path} is nested inside folder {ancestor}"
                raise FolderListingError(msg)


def folder_from_record(record: Any) -> Folder:
    """Build a folder from one listing entry."""
    if not isinstance(record, dict) or not record.get("path"):
        msg = f"Folder entry needs a 'path': {record!r}"
        raise FolderListingError(msg)

    raw_type = str(record.get("type") or FolderType.SOURCE.value).lower()
    try:
        folder_type = FolderType(raw_type)
    except ValueError as e:
        msg = f"Unknown folder type {raw_type!r} for {record['path']}"
        raise FolderListingError(msg) from e

    members = record.get("members") or []
    if not isinstance(members, list):
        msg = f"'members' of {record['path']} must be a list"
        raise FolderListingError(msg)

    wants_prefix = record.get("wants_namespace_prefix", True)
    if not isinstance(wants_prefix, bool):
        msg = f"'wants_namespace_prefix' of {record['path']} must be true or false"
        raise FolderListingError(msg)

    return Folder(
        path=PurePosixPath(str(record["path"])),
        folder_type=folder_type,
        wants_namespace_prefix=wants_prefix,
        members=frozenset(PurePosixPath(str(m)) for m in members),
    )


def folders_to_records(folders: Iterable[Folder]) -> list[dict[str, Any]]:
    """Convert folders into JSON-ready dictionaries."""
    return [
        {
            "path": str(f.path),
            "type": f.folder_type.value,
            "wants_namespace_prefix": f.wants_namespace_prefix,
            "members": sorted(str(m) for m in f.members),
        }
        for f in folders
    ]
