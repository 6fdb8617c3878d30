"""Filesystem adapter for DazzleFileLib.

This adapter lists real directories on the host file system. Every
listing opens its own ``os.scandir`` handle and closes it before returning,
so no handle outlives the call that needed it.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from ..core.adapter import ChildListing, ListingStatus, TreeAdapter
from ..core.node import TreeNode

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


class FileSystemNode(TreeNode):
    """Concrete node implementation for filesystem entries.

    Represents a file or directory. The path is made absolute on
    construction; everything else is computed on demand.
    """

    def __init__(self,
                 path: PathLike,
                 is_directory: Optional[bool] = None):
        """Initialize a filesystem node.

        Args:
            path: Path to the file or directory
            is_directory: Known directory flag (from a directory entry) to
                avoid an extra stat call; looked up lazily when None
        """
        self.path = Path(path).absolute()
        self._is_directory = is_directory

    def identifier(self) -> str:
        """Return absolute path as unique identifier."""
        return str(self.path)

    @property
    def absolute_path(self) -> str:
        return str(self.path)

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)

    @property
    def is_directory(self) -> bool:
        if self._is_directory is None:
            try:
                self._is_directory = self.path.is_dir()
            except OSError:
                self._is_directory = False
        return self._is_directory

    def exists(self) -> bool:
        return self.path.exists()

    def __repr__(self) -> str:
        return f"FileSystemNode(path={str(self.path)!r})"


class FileSystemAdapter(TreeAdapter):
    """Adapter for filesystem directory listing.

    Args:
        follow_symlinks: Treat symlinks to directories as directories
            (descended into). When False they are reported as plain entries.
        include_hidden: Whether to list entries whose name starts with '.'
        sort_children: Sort each listing by name. Without it the order is
            whatever the host file system returns.
    """

    def __init__(self,
                 follow_symlinks: bool = True,
                 include_hidden: bool = True,
                 sort_children: bool = True):
        self.follow_symlinks = follow_symlinks
        self.include_hidden = include_hidden
        self.sort_children = sort_children

    def list_children(self, node: FileSystemNode) -> ChildListing:
        """List child nodes (files and subdirectories) of ``node``."""
        path = node.absolute_path
        children: List[FileSystemNode] = []

        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    if not self.include_hidden and entry.name.startswith('.'):
                        continue
                    try:
                        is_dir = entry.is_dir(follow_symlinks=self.follow_symlinks)
                    except OSError:
                        is_dir = False
                    children.append(FileSystemNode(entry.path, is_directory=is_dir))
        except FileNotFoundError as e:
            return ChildListing(path, ListingStatus.NOT_FOUND, error=e)
        except NotADirectoryError as e:
            return ChildListing(path, ListingStatus.NOT_A_DIRECTORY, error=e)
        except PermissionError as e:
            return ChildListing(path, ListingStatus.PERMISSION_DENIED, error=e)
        except OSError as e:
            logger.debug("Listing %s failed: %s", path, e)
            return ChildListing(path, ListingStatus.ERROR, error=e)

        if not children:
            return ChildListing(path, ListingStatus.EMPTY)

        if self.sort_children:
            children.sort(key=lambda child: child.name)
        return ChildListing(path, ListingStatus.OK, children)

    def get_parent(self, node: FileSystemNode) -> Optional[FileSystemNode]:
        """Get parent directory node."""
        parent_path = node.path.parent
        if parent_path == node.path:
            return None
        return FileSystemNode(parent_path, is_directory=True)

    def real_identifier(self, node: FileSystemNode) -> str:
        """Resolve symlinks so a directory loop is entered only once."""
        if not self.follow_symlinks:
            return node.identifier()
        return os.path.realpath(node.absolute_path)

    def create_node(self, path: PathLike) -> FileSystemNode:
        """Create a node for a given path.

        Args:
            path: Path to create node for

        Returns:
            FileSystemNode instance
        """
        return FileSystemNode(path)
