"""Testing helpers for DazzleFileLib and its consumers."""

from .fixtures import SAMPLE_TREE, create_tree, enumerate_files, relative_names

__all__ = [
    'SAMPLE_TREE',
    'create_tree',
    'enumerate_files',
    'relative_names',
]
