"""Adapters for listing concrete name spaces."""

from .filesystem import FileSystemAdapter, FileSystemNode

__all__ = [
    'FileSystemAdapter',
    'FileSystemNode',
]
