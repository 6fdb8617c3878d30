"""TreeAdapter abstraction for DazzleFileLib.

The adapter knows HOW to list a directory. It reports the outcome of every
listing as a ChildListing instead of raising, which lets the walker decide
(through a ListingErrorPolicy) whether a failure means "empty" or "stop".
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from .node import TreeNode


class ListingStatus(Enum):
    """Outcome of listing a single directory."""
    OK = "ok"                                # At least one child
    EMPTY = "empty"                          # Readable, no children
    NOT_FOUND = "not_found"                  # Path does not exist
    NOT_A_DIRECTORY = "not_a_directory"      # Path is a file
    PERMISSION_DENIED = "permission_denied"  # Exists, not readable
    ERROR = "error"                          # Any other OS failure

    @property
    def is_failure(self) -> bool:
        """True for outcomes a strict caller may want to hear about."""
        return self in (ListingStatus.NOT_FOUND,
                        ListingStatus.PERMISSION_DENIED,
                        ListingStatus.ERROR)


@dataclass
class ChildListing:
    """Immediate children of one directory, plus how the listing went.

    Attributes:
        path: Absolute path of the listed directory
        status: Listing outcome
        children: Child nodes (empty unless status is OK)
        error: The OSError behind a failure status, if any
    """
    path: str
    status: ListingStatus
    children: List[TreeNode] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return not self.status.is_failure

    def __iter__(self) -> Iterator[TreeNode]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)


class TreeAdapter(ABC):
    """Abstract adapter for listing a hierarchical name space.

    Separating listing from the node lets the same nodes be walked with
    different options (hidden entries, symlinks, ordering) without
    changing the walker.
    """

    @abstractmethod
    def list_children(self, node: TreeNode) -> ChildListing:
        """List the immediate children of ``node``.

        Implementations must not raise for missing, unreadable or
        non-directory nodes; the outcome goes into the returned status.

        Args:
            node: The directory to list

        Returns:
            ChildListing with status and children
        """
        pass

    @abstractmethod
    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent TreeNode or None if node is a root
        """
        pass

    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Iterate over the children of ``node``, ignoring listing failures.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child TreeNode instances
        """
        return iter(self.list_children(node).children)

    def real_identifier(self, node: TreeNode) -> str:
        """Identifier used to detect a directory being entered twice.

        Adapters whose name space has aliases (symbolic links) override
        this to return a canonical form.
        """
        return node.identifier()
