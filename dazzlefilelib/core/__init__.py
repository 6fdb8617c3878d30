"""Core abstractions for DazzleFileLib.

Nodes, adapters, name matching, the walker and result collectors.
"""

from .node import TreeNode
from .adapter import ChildListing, ListingStatus, TreeAdapter
from .matcher import (
    CompiledPattern,
    ExtensionFilter,
    NameFilter,
    NodeFilter,
    PredicateFilter,
    WildcardFilter,
    as_filter,
    compile_extensions,
    compile_pattern,
    compile_wildcard,
    extensions_to_regex,
    wildcard_to_regex,
)
from .collector import (
    CountCollector,
    DataCollector,
    ListCollector,
    PathCollector,
    SetCollector,
    SpaceCollector,
    collect,
)
from .walker import TreeWalker

__all__ = [
    "TreeNode",
    "TreeAdapter",
    "ChildListing",
    "ListingStatus",
    "CompiledPattern",
    "NodeFilter",
    "WildcardFilter",
    "ExtensionFilter",
    "NameFilter",
    "PredicateFilter",
    "as_filter",
    "compile_wildcard",
    "compile_extensions",
    "compile_pattern",
    "wildcard_to_regex",
    "extensions_to_regex",
    "DataCollector",
    "SetCollector",
    "ListCollector",
    "PathCollector",
    "CountCollector",
    "SpaceCollector",
    "collect",
    "TreeWalker",
]
