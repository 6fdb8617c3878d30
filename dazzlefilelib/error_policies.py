"""
Listing error policies for DazzleFileLib.

The walker never decides on its own what a failed directory listing means.
It hands the failed ChildListing to a policy, which either swallows it
(returning no children), records it, or raises.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .errors import (
    ListingFailedError,
    ListingPermissionError,
    RootNotFoundError,
    WalkError,
)
from .core.adapter import ChildListing, ListingStatus

logger = logging.getLogger(__name__)


class ListingErrorPolicy(ABC):
    """
    Base class for listing error policies.

    ``handle`` is only called for listings whose status is a failure
    (NOT_FOUND, PERMISSION_DENIED or ERROR). An empty directory or a file
    (NOT_A_DIRECTORY) simply has no children and never reaches a policy.
    """

    @abstractmethod
    def handle(self, listing: ChildListing, depth: int) -> None:
        """
        Handle a failed listing.

        Args:
            listing: The failed listing, carrying status, path and error
            depth: Depth of the directory relative to the walk root (0 = root)

        Raises:
            WalkError: If the policy decides the walk must stop
        """
        pass


class LenientPolicy(ListingErrorPolicy):
    """Treat every failed listing as an empty directory.

    This is the default and matches the toolkit's historical behaviour:
    a missing root or an unreadable sub-directory yields nothing.
    """

    def handle(self, listing: ChildListing, depth: int) -> None:
        logger.debug("Treating %s listing of %s as empty: %s",
                     listing.status.value, listing.path, listing.error)


class FailFastPolicy(ListingErrorPolicy):
    """
    Policy that raises on the first failed listing, stopping the walk.

    Useful when a permission problem must not be mistaken for an empty tree.
    """

    def handle(self, listing: ChildListing, depth: int) -> None:
        raise to_walk_error(listing) from listing.error


class CollectErrorsPolicy(ListingErrorPolicy):
    """
    Policy that records every failed listing and continues silently.

    Inspect ``errors`` or ``get_statistics()`` once the walk is done.
    """

    def __init__(self):
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[str] = []

    def handle(self, listing: ChildListing, depth: int) -> None:
        self._record(listing, depth)

    def _record(self, listing: ChildListing, depth: int) -> None:
        self.errors.append({
            'path': listing.path,
            'depth': depth,
            'status': listing.status,
            'error': listing.error,
            'error_type': type(listing.error).__name__ if listing.error else None,
            'error_message': str(listing.error) if listing.error else '',
        })
        self.skipped_paths.append(listing.path)

    def get_statistics(self) -> dict:
        """
        Get statistics about failed listings.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'not_found': sum(1 for e in self.errors
                             if e['status'] is ListingStatus.NOT_FOUND),
            'permission_errors': sum(1 for e in self.errors
                                     if e['status'] is ListingStatus.PERMISSION_DENIED),
            'other_errors': sum(1 for e in self.errors
                                if e['status'] is ListingStatus.ERROR),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors,
        }


class ContinueOnErrorsPolicy(CollectErrorsPolicy):
    """Like CollectErrorsPolicy, but every failure is logged as a warning."""

    def handle(self, listing: ChildListing, depth: int) -> None:
        self._record(listing, depth)
        if listing.status is ListingStatus.PERMISSION_DENIED:
            logger.warning("Skipping inaccessible directory '%s': %s",
                           listing.path, listing.error)
        else:
            logger.warning("Could not list '%s' (%s): %s",
                           listing.path, listing.status.value, listing.error)


def to_walk_error(listing: ChildListing) -> WalkError:
    """Build the WalkError matching a failed listing's status."""
    if listing.status is ListingStatus.NOT_FOUND:
        return RootNotFoundError(f"Directory not found: {listing.path}", listing.path)
    if listing.status is ListingStatus.PERMISSION_DENIED:
        return ListingPermissionError(f"Permission denied: {listing.path}", listing.path)
    return ListingFailedError(f"Cannot list {listing.path}: {listing.error}", listing.path)
