"""Configuration system for DazzleFileLib.

This module defines how callers describe a walk: which entries to yield,
which to prune, how deep to go and what a failed listing means.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence, Union

from .core.matcher import (
    CompiledPattern,
    FilterSpec,
    PatternSpec,
    as_filter,
    compile_pattern,
)
from .core.node import TreeNode
from .error_policies import FailFastPolicy, LenientPolicy, ListingErrorPolicy

MatcherSpec = Union[PatternSpec, Callable[[TreeNode], bool], None]


def resolve_matcher(matcher: MatcherSpec) -> Optional[Callable[[TreeNode], bool]]:
    """Turn a matcher specification into a node predicate.

    Strings and extension collections are compiled; callables (including
    NodeFilter instances) are used directly; None matches everything.
    """
    if matcher is None:
        return None
    if isinstance(matcher, CompiledPattern):
        return matcher
    if callable(matcher):
        return matcher
    return compile_pattern(matcher)


@dataclass
class WalkConfig:
    """Complete configuration for a directory walk.

    Attributes:
        recursive: Descend into subdirectories
        include_directories: Yield directory nodes as well as files
        matcher: Wildcard string, extension collection, compiled pattern or
            predicate a file must satisfy to be yielded (None = all files)
        exclude_filters: Predicates evaluated against each directory's
            immediate children; a matching child is neither yielded nor
            descended into
        match_directories: Also test directories against ``matcher`` before
            yielding them (they are descended into either way)
        max_depth: Deepest level to yield, 1 = direct children of the root
        error_policy: What a failed listing means (default: empty)
        follow_symlinks: Treat symlinked directories as directories
        include_hidden: List entries whose name starts with '.'
        sort_children: Sort each listing by name
    """

    recursive: bool = True
    include_directories: bool = False
    matcher: MatcherSpec = None
    exclude_filters: Sequence[FilterSpec] = field(default_factory=tuple)
    match_directories: bool = False
    max_depth: Optional[int] = None
    error_policy: ListingErrorPolicy = field(default_factory=LenientPolicy)
    follow_symlinks: bool = True
    include_hidden: bool = True
    sort_children: bool = True

    # Convenience constructors for common configurations

    @classmethod
    def shallow(cls, matcher: MatcherSpec = None, **kwargs) -> 'WalkConfig':
        """Direct children of the root only."""
        return cls(recursive=False, matcher=matcher, **kwargs)

    @classmethod
    def deep(cls, matcher: MatcherSpec = None, **kwargs) -> 'WalkConfig':
        """Whole tree, files only."""
        return cls(recursive=True, matcher=matcher, **kwargs)

    @classmethod
    def strict(cls, matcher: MatcherSpec = None, **kwargs) -> 'WalkConfig':
        """Whole tree, raising on the first directory that cannot be listed."""
        return cls(recursive=True, matcher=matcher,
                   error_policy=FailFastPolicy(), **kwargs)

    def effective_max_depth(self) -> Optional[int]:
        """Depth limit after folding in ``recursive``."""
        if not self.recursive:
            return 1
        return self.max_depth

    def resolved_matcher(self) -> Optional[Callable[[TreeNode], bool]]:
        return resolve_matcher(self.matcher)

    def resolved_exclude_filters(self) -> List[Callable[[TreeNode], bool]]:
        return [as_filter(spec) for spec in self.exclude_filters]

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_depth is not None and self.max_depth < 1:
            errors.append("max_depth must be at least 1")

        if isinstance(self.exclude_filters, (str, bytes)):
            errors.append("exclude_filters must be a sequence of filters, not a string")
        else:
            for spec in self.exclude_filters:
                if not (isinstance(spec, str) or callable(spec)):
                    errors.append(f"exclude filter {spec!r} is not callable")

        if not isinstance(self.error_policy, ListingErrorPolicy):
            errors.append("error_policy must be a ListingErrorPolicy")

        if self.match_directories and not self.include_directories:
            errors.append("match_directories requires include_directories")

        return errors
