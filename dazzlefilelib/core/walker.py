"""Directory walking for DazzleFileLib.

The TreeWalker performs a depth-first, pre-order walk below a root and
yields the entries a WalkConfig selects. It never holds state between
calls to ``walk``; each walk lists the tree afresh.
"""

import logging
from typing import Callable, Iterator, List, Optional, Set, Tuple

from ..config import WalkConfig
from ..errors import ConfigurationError
from .adapter import ChildListing, ListingStatus, TreeAdapter
from .node import TreeNode

logger = logging.getLogger(__name__)


class TreeWalker:
    """Depth-first pre-order walker with inclusion and exclusion filtering.

    Per directory the walker:

    1. lists the immediate children (a failed listing goes to the error
       policy and counts as no children),
    2. drops every child matched by any exclusion filter,
    3. for each remaining directory: yields it if directories are
       requested, then descends into it,
    4. for each remaining file: yields it if it satisfies the matcher.

    The matcher only gates what is yielded. It never prunes recursion;
    exclusion filters do.
    """

    def __init__(self, adapter: TreeAdapter, config: Optional[WalkConfig] = None):
        """Initialize walker with an adapter and configuration.

        Args:
            adapter: TreeAdapter for listing directories
            config: Walk configuration (defaults to a recursive file walk)

        Raises:
            ConfigurationError: If the configuration is inconsistent
        """
        self.adapter = adapter
        self.config = config or WalkConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self._matcher = self.config.resolved_matcher()
        self._exclude_filters = self.config.resolved_exclude_filters()
        self._max_depth = self.config.effective_max_depth()

    def walk(self, root: TreeNode) -> Iterator[TreeNode]:
        """Walk below ``root`` and yield the selected nodes.

        The root itself is never yielded. A missing root or a root that is
        not a directory yields nothing (unless the error policy raises).
        """
        for node, _depth in self.walk_with_depth(root):
            yield node

    def walk_with_depth(self, root: TreeNode) -> Iterator[Tuple[TreeNode, int]]:
        """Like ``walk`` but yields ``(node, depth)``, depth 1 = root's children."""
        for event, node, depth in self._events(root):
            if event == 'yield':
                yield (node, depth)

    def walk_events(self, root: TreeNode) -> Iterator[Tuple[str, TreeNode, int]]:
        """Low-level event stream used by collectors.

        Yields ``('directory', directory, depth)`` for every directory that
        survives the exclusion filters, before it is yielded or descended
        into, and ``('yield', node, depth)`` for every selected node.
        Directories are reported whether or not they are yielded.
        """
        return self._events(root)

    # Internals

    def _events(self, root: TreeNode) -> Iterator[Tuple[str, TreeNode, int]]:
        visited: Set[str] = {self.adapter.real_identifier(root)}

        def _walk_directory(directory: TreeNode, depth: int) -> Iterator[Tuple[str, TreeNode, int]]:
            for child in self._select_children(directory, depth):
                child_depth = depth + 1
                if child.is_directory:
                    yield ('directory', child, child_depth)
                    if self.config.include_directories and self._directory_qualifies(child):
                        yield ('yield', child, child_depth)
                    if self._should_descend(child_depth):
                        real_id = self.adapter.real_identifier(child)
                        if real_id in visited:
                            logger.debug("Skipping already visited directory %s", child)
                            continue
                        visited.add(real_id)
                        yield from _walk_directory(child, child_depth)
                elif self._file_qualifies(child):
                    yield ('yield', child, child_depth)

        yield from _walk_directory(root, 0)

    def _select_children(self, directory: TreeNode, depth: int) -> List[TreeNode]:
        """List a directory and apply the exclusion filters to its children."""
        listing: ChildListing = self.adapter.list_children(directory)
        if listing.status.is_failure:
            self.config.error_policy.handle(listing, depth)
            return []
        if listing.status is not ListingStatus.OK:
            return []

        children = listing.children
        if not self._exclude_filters:
            return list(children)

        # Evaluated once per level against the immediate children.
        excluded: Set[str] = set()
        for exclude in self._exclude_filters:
            for child in children:
                if exclude(child):
                    excluded.add(child.identifier())
        if excluded:
            logger.debug("Excluded %d of %d entries in %s",
                         len(excluded), len(children), directory)
        return [child for child in children if child.identifier() not in excluded]

    def _should_descend(self, child_depth: int) -> bool:
        if self._max_depth is None:
            return True
        return child_depth < self._max_depth

    def _file_qualifies(self, node: TreeNode) -> bool:
        return self._matches(node)

    def _directory_qualifies(self, node: TreeNode) -> bool:
        if not self.config.match_directories:
            return True
        return self._matches(node)

    def _matches(self, node: TreeNode) -> bool:
        matcher: Optional[Callable[[TreeNode], bool]] = self._matcher
        if matcher is None:
            return True
        return bool(matcher(node))
