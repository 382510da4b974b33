"""Namespace resolution by reading the package declaration of a file."""

import logging
import re
from pathlib import Path, PurePosixPath

from root_simplifier.namespace_resolver import NamespaceResolver

logger = logging.getLogger(__name__)

DEFAULT_DECLARATION_PATTERN = r"^\s*package\s+([\w.]+)\s*;"


class ParsingNamespaceResolver:
    """Reads source files to find the namespace they declare.

    Files that are missing, unreadable or carry no declaration are handed to
    the fallback resolver.
    """

    def __init__(
        self,
        project_root: Path,
        fallback: NamespaceResolver,
        declaration_pattern: str = DEFAULT_DECLARATION_PATTERN,
    ) -> None:
        """Initialize with the directory that file paths are relative to."""
        self.project_root = project_root
        self.fallback = fallback
        self.declaration = re.compile(declaration_pattern, re.MULTILINE)

    def resolve(self, file_path: PurePosixPath) -> PurePosixPath | None:
        """Return the declared namespace of a file as a directory path."""
        declared = self._read_declaration(file_path)
        if declared is None:
            return self.fallback.resolve(file_path)
        return PurePosixPath(*declared.split("."))

    def _read_declaration(self, file_path: PurePosixPath) -> str | None:
        """Extract the dotted namespace declared in a file, if any."""
        source = self.project_root / file_path
        try:
            if not source.is_file():
                return None
            text = source.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", source, e)
            return None

        match = self.declaration.search(text)
        if match is None:
            logger.debug("No namespace declaration in %s", source)
            return None
        return match.group(1)
