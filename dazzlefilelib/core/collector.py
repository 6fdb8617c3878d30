"""Result collection strategies for DazzleFileLib.

Collectors reduce a walk to a single result: a set or list of nodes, a
count, or a space figure. Every collector starts empty; ``collect`` runs a
fresh walk into a fresh collector, so nothing carries over between calls.
"""

import shutil
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Set

from .adapter import ChildListing, ListingStatus
from .node import TreeNode


class DataCollector(ABC):
    """Abstract base class for reduction strategies.

    The walker feeds every selected node to ``collect``; directories that
    survive exclusion are additionally reported to ``directory_seen`` so
    a collector can tally them even when the walk does not yield them.
    """

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> None:
        """Consume one selected node.

        Args:
            node: The selected node
            depth: Depth relative to the walk root (1 = direct child)
        """
        pass

    def directory_seen(self, node: TreeNode, depth: int) -> None:
        """Called once for every directory the walk reaches."""
        pass

    @abstractmethod
    def result(self) -> Any:
        """Return the reduced value."""
        pass


class SetCollector(DataCollector):
    """Collects a deduplicated set of nodes. Order is irrelevant."""

    def __init__(self):
        self._nodes: Set[TreeNode] = set()

    def collect(self, node: TreeNode, depth: int) -> None:
        self._nodes.add(node)

    def result(self) -> Set[TreeNode]:
        return self._nodes


class ListCollector(DataCollector):
    """Collects nodes in visitation order, duplicates kept."""

    def __init__(self):
        self._nodes: List[TreeNode] = []

    def collect(self, node: TreeNode, depth: int) -> None:
        self._nodes.append(node)

    def result(self) -> List[TreeNode]:
        return self._nodes


class PathCollector(DataCollector):
    """Collects node identifiers (absolute paths) in visitation order."""

    def __init__(self):
        self._paths: List[str] = []

    def collect(self, node: TreeNode, depth: int) -> None:
        self._paths.append(node.identifier())

    def result(self) -> List[str]:
        return self._paths


class CountCollector(DataCollector):
    """Counts files, and optionally every directory reached.

    The directory tally is independent of the walk's own
    ``include_directories``: directories are counted as the walk reaches
    them, not as yielded results, and yielded directories are never
    counted twice.
    """

    def __init__(self, include_directories: bool = False):
        self.include_directories = include_directories
        self.count = 0

    def collect(self, node: TreeNode, depth: int) -> None:
        if not node.is_directory:
            self.count += 1

    def directory_seen(self, node: TreeNode, depth: int) -> None:
        if self.include_directories:
            self.count += 1

    def result(self) -> int:
        return self.count


class SpaceCollector(DataCollector):
    """Reports the capacity of the volume holding the walk root.

    This is whole-volume space, the same figure for every path on the
    volume, NOT the summed size of the files below the root. It ignores
    the nodes of the walk entirely; use ``measure`` directly.
    """

    UNITS: Dict[str, int] = {
        'B': 1,
        'KB': 1024,
        'MB': 1024 * 1024,
    }

    def __init__(self, unit: str = 'B'):
        unit = unit.upper()
        if unit not in self.UNITS:
            raise ValueError(f"Unknown unit: {unit}. Choose from: {', '.join(self.UNITS)}")
        self.unit = unit
        self.total = 0

    def measure(self, root: TreeNode, error_policy: Optional[Any] = None) -> int:
        """Read the total capacity of ``root``'s volume.

        A missing root names no volume and measures 0. The failure is
        handed to ``error_policy`` first, so a fail-fast policy still
        raises.
        """
        try:
            usage = shutil.disk_usage(root.identifier())
        except FileNotFoundError as e:
            if error_policy is not None:
                listing = ChildListing(root.identifier(), ListingStatus.NOT_FOUND, error=e)
                error_policy.handle(listing, 0)
            self.total = 0
            return self.total
        self.total = usage.total // self.UNITS[self.unit]
        return self.total

    def collect(self, node: TreeNode, depth: int) -> None:
        pass

    def result(self) -> int:
        return self.total


def collect(walker: Any, root: TreeNode, collector: DataCollector) -> Any:
    """Drive a fresh walk into ``collector`` and return its result.

    Args:
        walker: A TreeWalker
        root: Root node of the walk
        collector: An empty collector

    Returns:
        ``collector.result()``
    """
    if isinstance(collector, SpaceCollector):
        return collector.measure(root, walker.config.error_policy)

    for event, node, depth in walker.walk_events(root):
        if event == 'directory':
            collector.directory_seen(node, depth)
        else:
            collector.collect(node, depth)
    return collector.result()
