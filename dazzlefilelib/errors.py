"""Exception hierarchy for DazzleFileLib.

Only explicit problems are raised. "Nothing found" situations are handled
locally by the walker and never surface as exceptions unless a strict
listing policy asks for it.
"""

from pathlib import Path
from typing import Optional, Union


class DazzleFileError(Exception):
    """Base class for all DazzleFileLib errors."""
    pass


class ConfigurationError(DazzleFileError, ValueError):
    """Raised when a WalkConfig fails validation."""
    pass


class WalkError(DazzleFileError):
    """Raised by strict listing policies when a directory cannot be listed.

    Attributes:
        path: Directory whose listing failed
    """

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class RootNotFoundError(WalkError):
    """The directory to list does not exist."""
    pass


class ListingPermissionError(WalkError):
    """The directory exists but may not be read."""
    pass


class ListingFailedError(WalkError):
    """Any other OS level failure while listing a directory."""
    pass


class PreconditionViolation(DazzleFileError):
    """A request was rejected before any file system mutation was attempted."""
    pass


class ParentDirectoryError(PreconditionViolation):
    """The parent of a directory to create is missing or not a directory.

    Attributes:
        parent: The offending parent path
    """

    def __init__(self, message: str, parent: Union[str, Path]):
        super().__init__(message)
        self.parent = parent


class DirectoryCannotBeCreatedError(DazzleFileError):
    """A directory could not be brought into existence."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        super().__init__(message)
        self.path = path


class QuietIOError(RuntimeError):
    """Unchecked wrapper raised by the ``*_quietly`` helpers.

    The original ``OSError`` is available as ``__cause__``.
    """
    pass
