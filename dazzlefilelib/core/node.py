"""TreeNode abstraction for DazzleFileLib.

A TreeNode names one entry and knows whether it is a directory.
Listing children is delegated to the TreeAdapter, so a node never holds on
to directory handles or cached listings.
"""

from abc import ABC, abstractmethod


class TreeNode(ABC):
    """Abstract base class for entries of a hierarchical name space.

    Nodes are read-only, transient views. They are valid as query results
    only; the underlying entry may change or vanish at any time.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return a unique identifier for this node.

        For file system entries this is the absolute path. It must be
        stable across walks and suitable as a set member or dict key.

        Returns:
            str: Unique, stable identifier for this node
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Last component of the node's path."""
        pass

    @property
    @abstractmethod
    def is_directory(self) -> bool:
        """True if the node may have children."""
        pass

    def is_leaf(self) -> bool:
        """Check if this node is a leaf (cannot have children).

        Returns:
            bool: True for files, False for directories
        """
        return not self.is_directory

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.identifier()!r})"

    def __eq__(self, other: object) -> bool:
        """Two nodes for the same path are equal, however they were created."""
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())
