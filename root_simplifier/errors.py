"""Exception types raised by the folder simplifier."""


class InternalConsistencyError(RuntimeError):
    """Raised when the merge state contradicts the ancestry graph."""


class FolderListingError(ValueError):
    """Raised when a folder listing cannot be turned into folders."""
