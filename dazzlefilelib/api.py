"""High-level API for DazzleFileLib.

This module provides simple, functional interfaces for common file search
operations. These functions wrap the walker, adapter and collectors for
ease of use in simple cases.
"""

import os
import re
from pathlib import Path
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Set, Union

from .adapters.filesystem import FileSystemAdapter, FileSystemNode
from .config import MatcherSpec, WalkConfig
from .core.collector import (
    CountCollector,
    ListCollector,
    SetCollector,
    SpaceCollector,
    collect,
)
from .core.matcher import (
    CompiledPattern,
    FilterSpec,
    compile_extensions,
    compile_wildcard,
)
from .core.node import TreeNode
from .core.walker import TreeWalker


PathLike = Union[str, "os.PathLike[str]"]


def _root_node(root: Union[PathLike, FileSystemNode]) -> FileSystemNode:
    if isinstance(root, FileSystemNode):
        return root
    return FileSystemNode(root)


def make_walker(config: Optional[WalkConfig] = None) -> TreeWalker:
    """Build a TreeWalker over the host file system for ``config``."""
    config = config or WalkConfig()
    adapter = FileSystemAdapter(
        follow_symlinks=config.follow_symlinks,
        include_hidden=config.include_hidden,
        sort_children=config.sort_children,
    )
    return TreeWalker(adapter, config)


def walk_files(
    root: Union[PathLike, FileSystemNode],
    pattern: MatcherSpec = None,
    recursive: bool = True,
    include_directories: bool = False,
    exclude_filters: Sequence[FilterSpec] = (),
    **kwargs
) -> Iterator[FileSystemNode]:
    """Simple interface for walking a directory tree.

    This is the primary high-level function. It lazily yields the entries
    below ``root`` that the criteria select.

    Args:
        root: Directory to walk
        pattern: Wildcard string, extension collection, compiled pattern or
            predicate files must satisfy (None = all files)
        recursive: Descend into subdirectories
        include_directories: Also yield directories
        exclude_filters: Predicates pruning matching entries per level
        **kwargs: Additional WalkConfig options

    Returns:
        Lazy iterator over the FileSystemNode instances that match the
        criteria

    Raises:
        ConfigurationError: If the options are inconsistent (raised by
            the call itself, before any iteration)

    Example:
        >>> for node in walk_files("/home/user/src", "*.py"):
        ...     print(node.absolute_path)
    """
    config = WalkConfig(
        recursive=recursive,
        include_directories=include_directories,
        matcher=pattern,
        exclude_filters=tuple(exclude_filters),
        **kwargs
    )
    return make_walker(config).walk(_root_node(root))


def find_files(
    root: Union[PathLike, FileSystemNode],
    pattern: str = "*",
    recursive: bool = False,
    include_directories: bool = False,
    exclude_filters: Sequence[FilterSpec] = (),
) -> List[FileSystemNode]:
    """Find files whose name matches a wildcard pattern.

    Args:
        root: Directory to search
        pattern: Wildcard pattern, ``*`` and ``?`` allowed
        recursive: Search subdirectories too
        include_directories: Add every directory reached to the result
        exclude_filters: Predicates pruning matching entries per level

    Returns:
        Matching nodes in visitation order
    """
    config = WalkConfig(
        recursive=recursive,
        include_directories=include_directories,
        matcher=compile_wildcard(pattern),
        exclude_filters=tuple(exclude_filters),
    )
    return collect(make_walker(config), _root_node(root), ListCollector())


def find_files_recursive(
    root: Union[PathLike, FileSystemNode],
    pattern: str = "*",
    include_directories: bool = False,
) -> List[FileSystemNode]:
    """Recursive ``find_files``."""
    return find_files(root, pattern, recursive=True,
                      include_directories=include_directories)


def find_files_with_extensions(
    root: Union[PathLike, FileSystemNode],
    extensions: Iterable[str],
    recursive: bool = True,
) -> List[FileSystemNode]:
    """Find files whose extension is one of ``extensions``, ignoring case."""
    config = WalkConfig(recursive=recursive, matcher=compile_extensions(extensions))
    return collect(make_walker(config), _root_node(root), ListCollector())


def find_files_matching(
    root: Union[PathLike, FileSystemNode],
    predicate: Callable[[TreeNode], bool],
    recursive: bool = False,
) -> Set[FileSystemNode]:
    """Find every entry, file or directory, that satisfies ``predicate``.

    Unlike the pattern searches, directories are tested against the
    predicate too; matching directories are part of the result and every
    directory is descended into when ``recursive``.
    """
    config = WalkConfig(
        recursive=recursive,
        include_directories=True,
        match_directories=True,
        matcher=predicate,
    )
    return collect(make_walker(config), _root_node(root), SetCollector())


def find_files_excluding(
    root: Union[PathLike, FileSystemNode],
    *exclude_filters: FilterSpec,
) -> Set[FileSystemNode]:
    """All files below ``root`` except those pruned by ``exclude_filters``."""
    config = WalkConfig(recursive=True, exclude_filters=exclude_filters)
    return collect(make_walker(config), _root_node(root), SetCollector())


def find_files_with_prefix_and_extension(
    root: Union[PathLike, FileSystemNode],
    prefix: str,
    extension: str,
    recursive: bool = False,
) -> List[FileSystemNode]:
    """Find files named ``<prefix>*.<extension>``.

    Both parts are literal text; wildcard characters in them are not
    special.
    """
    extension = extension.lstrip('.')
    regex = rf"{re.escape(prefix)}.*\.{re.escape(extension)}"
    pattern = CompiledPattern((prefix, extension), regex, anchored_start=True,
                              flags=re.DOTALL)
    config = WalkConfig(recursive=recursive, matcher=pattern)
    return collect(make_walker(config), _root_node(root), ListCollector())


def get_all_files(
    root: Union[PathLike, FileSystemNode],
    recursive: bool = False,
    include_directories: bool = False,
) -> List[FileSystemNode]:
    """Every file directly in ``root``, or below it when ``recursive``."""
    config = WalkConfig(recursive=recursive, include_directories=include_directories)
    return collect(make_walker(config), _root_node(root), ListCollector())


def count_all_files(
    root: Union[PathLike, FileSystemNode],
    include_directories: bool = False,
    exclude_filters: Sequence[FilterSpec] = (),
    recursive: bool = True,
) -> int:
    """Count the files below ``root``, and the directories if asked to.

    Args:
        root: Directory to count
        include_directories: Count every directory reached as well
        exclude_filters: Predicates pruning matching entries per level
        recursive: Count subdirectories' content too

    Returns:
        Non-negative count
    """
    config = WalkConfig(recursive=recursive, exclude_filters=tuple(exclude_filters))
    return collect(make_walker(config), _root_node(root),
                   CountCollector(include_directories=include_directories))


def list_dirs(root: Union[PathLike, FileSystemNode]) -> List[FileSystemNode]:
    """Immediate subdirectories of ``root``."""
    config = WalkConfig(
        recursive=False,
        include_directories=True,
        match_directories=True,
        matcher=lambda node: node.is_directory,
    )
    return collect(make_walker(config), _root_node(root), ListCollector())


def contains_file(parent: PathLike, search: PathLike) -> bool:
    """Check whether ``parent`` directly contains an entry named like ``search``.

    Only the last component of ``search`` is compared. A missing or
    unreadable ``parent`` contains nothing.
    """
    name = Path(search).name
    config = WalkConfig(
        recursive=False,
        include_directories=True,
        match_directories=True,
        matcher=lambda node: node.name == name,
    )
    for _ in make_walker(config).walk(_root_node(parent)):
        return True
    return False


def contains_file_recursive(parent: PathLike, search: PathLike) -> bool:
    """Check whether ``search`` (by absolute path) lies anywhere below ``parent``."""
    target = str(Path(search).absolute())
    config = WalkConfig(
        recursive=True,
        include_directories=True,
        match_directories=True,
        matcher=lambda node: node.identifier() == target,
    )
    for _ in make_walker(config).walk(_root_node(parent)):
        return True
    return False


def get_root_directory(path: PathLike) -> Path:
    """Topmost ancestor of ``path`` (``/`` on POSIX, the drive on Windows)."""
    current = Path(path).absolute()
    while current.parent != current:
        current = current.parent
    return current


def find_line_index(file: PathLike, search: str, encoding: str = "utf-8") -> int:
    """Index of the first line in ``file`` that starts with ``search``.

    Returns:
        Zero-based line index, or -1 if no line starts with ``search``

    Raises:
        OSError: If the file cannot be read
    """
    with open(file, 'r', encoding=encoding) as handle:
        for index, line in enumerate(handle):
            if line.startswith(search):
                return index
    return -1


def get_total_space(root: Union[PathLike, FileSystemNode], unit: str = 'B') -> int:
    """Capacity of the volume holding ``root``.

    This is whole-volume space, not the size of the files below ``root``.

    Args:
        root: Any path on the volume
        unit: 'B', 'KB' or 'MB'

    Returns:
        Capacity in ``unit``, or 0 if ``root`` does not exist
    """
    return collect(make_walker(), _root_node(root), SpaceCollector(unit))


def get_total_space_in_kilobytes(root: Union[PathLike, FileSystemNode]) -> int:
    return get_total_space(root, 'KB')


def get_total_space_in_megabytes(root: Union[PathLike, FileSystemNode]) -> int:
    return get_total_space(root, 'MB')
