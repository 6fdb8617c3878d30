"""Directory creation with outcome reporting.

Every call makes at most one creation attempt and reports what happened as
a CreationState. A refused creation is a value (FAILED), not an exception,
so a batch can carry on past individual failures. Requests that are wrong
before anything is attempted (a missing parent) raise instead.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Dict, Iterable, Mapping, Union

from .errors import DirectoryCannotBeCreatedError, ParentDirectoryError, QuietIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class CreationState(Enum):
    """Outcome of a directory creation request."""
    PENDING = "pending"                # Nothing processed yet
    ALREADY_EXISTS = "already_exists"  # Directory was there, untouched
    FAILED = "failed"                  # Creation attempted and refused
    CREATED = "created"                # Creation attempted and succeeded


def ensure_directory(target: PathLike, parents: bool = False) -> CreationState:
    """Create ``target`` unless it already is a directory.

    Args:
        target: Directory to create
        parents: Also create missing ancestors

    Returns:
        ALREADY_EXISTS if anything already exists at ``target``, a plain
        file included (nothing is touched), CREATED on success, FAILED if
        the file system refused (missing parent, permissions)
    """
    path = Path(target)
    if path.exists():
        return CreationState.ALREADY_EXISTS

    try:
        path.mkdir(parents=parents)
    except FileExistsError:
        # Another creator may have won the race.
        if path.is_dir():
            return CreationState.ALREADY_EXISTS
        logger.warning("Cannot create %s: a non-directory entry appeared", path)
        return CreationState.FAILED
    except OSError as e:
        logger.warning("Cannot create %s: %s", path, e)
        return CreationState.FAILED

    logger.debug("Created directory %s", path)
    return CreationState.CREATED


def check_parent_directory(parent: PathLike) -> Path:
    """Raise ParentDirectoryError unless ``parent`` is an existing directory."""
    parent_path = Path(parent)
    if not parent_path.exists():
        raise ParentDirectoryError(
            f"Given parent directory does not exist: {parent_path}", parent_path)
    if not parent_path.is_dir():
        raise ParentDirectoryError(
            f"Given parent file is not a directory: {parent_path}", parent_path)
    return parent_path


def new_directory(parent: PathLike, name: str) -> CreationState:
    """Create directory ``name`` inside an existing ``parent``.

    The parent is checked before anything is attempted.

    Raises:
        ParentDirectoryError: If ``parent`` is missing or not a directory
    """
    parent_path = check_parent_directory(parent)
    return ensure_directory(parent_path / name)


def ensure_directories(targets: Iterable[PathLike],
                       parents: bool = False) -> Dict[Path, CreationState]:
    """Create several directories, reporting each outcome separately.

    Targets are processed in order, so a parent listed before its child
    exists by the time the child is attempted.

    Returns:
        Mapping from each target path to its own CreationState
    """
    results: Dict[Path, CreationState] = {}
    for target in targets:
        path = Path(target)
        results[path] = ensure_directory(path, parents=parents)
    return results


def last_state(results: Mapping[Path, CreationState]) -> CreationState:
    """Fold a batch result to the state of the last directory processed.

    This is not a summary: an earlier FAILED is hidden by a later CREATED.

    Returns:
        The last state, or PENDING for an empty batch
    """
    states = list(results.values())
    if not states:
        return CreationState.PENDING
    return states[-1]


def make_directory(path: PathLike) -> bool:
    """Create exactly one directory.

    Returns:
        True if the directory exists afterwards

    Raises:
        OSError: If it exists already or cannot be created
    """
    directory = Path(path)
    directory.mkdir()
    return directory.exists()


def make_directories(path: PathLike) -> bool:
    """Create a directory and any missing ancestors.

    Returns:
        True if the directory exists afterwards

    Raises:
        OSError: If it cannot be created (an existing directory is fine)
    """
    directory = Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory.exists()


def make_directory_quietly(path: PathLike) -> bool:
    """``make_directory`` raising QuietIOError instead of OSError."""
    try:
        return make_directory(path)
    except OSError as e:
        raise QuietIOError(f"Cannot create directory {path}: {e}") from e


def make_directories_quietly(path: PathLike) -> bool:
    """``make_directories`` raising QuietIOError instead of OSError."""
    try:
        return make_directories(path)
    except OSError as e:
        raise QuietIOError(f"Cannot create directories {path}: {e}") from e


def make_parent_dirs(file: PathLike) -> bool:
    """Create the missing parent directories of ``file``.

    Returns:
        True if nothing needed creating or the parents were created,
        False if creating them failed
    """
    file_path = Path(file)
    if file_path.exists():
        return True
    parent = file_path.parent
    if parent.exists():
        return True
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.warning("Cannot create parent directories of %s: %s", file_path, e)
        return False
    return True


def require_directory(path: PathLike, parents: bool = True) -> Path:
    """Make sure ``path`` is a directory, or raise.

    Raises:
        DirectoryCannotBeCreatedError: If the directory could not be created
            or a non-directory entry occupies ``path``
    """
    state = ensure_directory(path, parents=parents)
    if state is CreationState.FAILED or not Path(path).is_dir():
        raise DirectoryCannotBeCreatedError(f"Directory cannot be created: {path}", path)
    return Path(path)
