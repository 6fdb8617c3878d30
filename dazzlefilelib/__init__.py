"""DazzleFileLib - File System Helper Toolkit.

DazzleFileLib walks directory trees with wildcard, extension and predicate
matching, reduces walks to sets, lists and counts, and creates directories
while reporting what happened.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from dazzlefilelib import find_files_recursive, ensure_directory

    logs = find_files_recursive("/var/app", "*.log")
    state = ensure_directory("/var/app/archive")
━━━━━━━━━━━━━━━━━━━━━━━━━━

Everything is synchronous; each call lists the tree afresh.
"""

import logging

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Core components
from .core import (
    TreeNode,
    TreeAdapter,
    ChildListing,
    ListingStatus,
    TreeWalker,
    CompiledPattern,
    NodeFilter,
    WildcardFilter,
    ExtensionFilter,
    NameFilter,
    PredicateFilter,
    as_filter,
    compile_wildcard,
    compile_extensions,
    compile_pattern,
    wildcard_to_regex,
    extensions_to_regex,
    DataCollector,
    SetCollector,
    ListCollector,
    PathCollector,
    CountCollector,
    SpaceCollector,
    collect,
)

# Adapters
from .adapters.filesystem import FileSystemAdapter, FileSystemNode

# Configuration and error handling
from .config import WalkConfig
from .error_policies import (
    ListingErrorPolicy,
    LenientPolicy,
    FailFastPolicy,
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
)
from .errors import (
    DazzleFileError,
    ConfigurationError,
    WalkError,
    RootNotFoundError,
    ListingPermissionError,
    ListingFailedError,
    PreconditionViolation,
    ParentDirectoryError,
    DirectoryCannotBeCreatedError,
    QuietIOError,
)

# Directory lifecycle
from .directory import (
    CreationState,
    ensure_directory,
    ensure_directories,
    new_directory,
    last_state,
    make_directory,
    make_directories,
    make_directory_quietly,
    make_directories_quietly,
    make_parent_dirs,
    require_directory,
)

# File I/O helpers
from .fileio import (
    FileContentInfo,
    read_bytes,
    read_text,
    read_lines,
    write_bytes,
    write_text,
    write_lines,
    copy_file,
    modify_file,
    checksum,
    bytes_checksum,
    to_file_content_info,
    to_file,
    read_text_quietly,
    write_text_quietly,
    write_bytes_quietly,
    write_lines_quietly,
    copy_file_quietly,
)

# High-level API
from .api import (
    make_walker,
    walk_files,
    find_files,
    find_files_recursive,
    find_files_with_extensions,
    find_files_matching,
    find_files_excluding,
    find_files_with_prefix_and_extension,
    get_all_files,
    count_all_files,
    list_dirs,
    contains_file,
    contains_file_recursive,
    get_root_directory,
    find_line_index,
    get_total_space,
    get_total_space_in_kilobytes,
    get_total_space_in_megabytes,
)

__all__ = [
    "__version__",
    # Core
    "TreeNode",
    "TreeAdapter",
    "ChildListing",
    "ListingStatus",
    "TreeWalker",
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
    # Adapters
    "FileSystemAdapter",
    "FileSystemNode",
    # Config and errors
    "WalkConfig",
    "ListingErrorPolicy",
    "LenientPolicy",
    "FailFastPolicy",
    "CollectErrorsPolicy",
    "ContinueOnErrorsPolicy",
    "DazzleFileError",
    "ConfigurationError",
    "WalkError",
    "RootNotFoundError",
    "ListingPermissionError",
    "ListingFailedError",
    "PreconditionViolation",
    "ParentDirectoryError",
    "DirectoryCannotBeCreatedError",
    "QuietIOError",
    # Directory lifecycle
    "CreationState",
    "ensure_directory",
    "ensure_directories",
    "new_directory",
    "last_state",
    "make_directory",
    "make_directories",
    "make_directory_quietly",
    "make_directories_quietly",
    "make_parent_dirs",
    "require_directory",
    # API
    "make_walker",
    "walk_files",
    "find_files",
    "find_files_recursive",
    "find_files_with_extensions",
    "find_files_matching",
    "find_files_excluding",
    "find_files_with_prefix_and_extension",
    "get_all_files",
    "count_all_files",
    "list_dirs",
    "contains_file",
    "contains_file_recursive",
    "get_root_directory",
    "find_line_index",
    "get_total_space",
    "get_total_space_in_kilobytes",
    "get_total_space_in_megabytes",
    # File I/O
    "FileContentInfo",
    "read_bytes",
    "read_text",
    "read_lines",
    "write_bytes",
    "write_text",
    "write_lines",
    "copy_file",
    "modify_file",
    "checksum",
    "bytes_checksum",
    "to_file_content_info",
    "to_file",
    "read_text_quietly",
    "write_text_quietly",
    "write_bytes_quietly",
    "write_lines_quietly",
    "copy_file_quietly",
]
