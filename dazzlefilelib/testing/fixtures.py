"""Test fixtures for DazzleFileLib consumers.

Builds small directory trees from nested dictionaries so tests can describe
the layout they need in one literal.
"""

from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

TreeSpec = Mapping[str, Any]


def create_tree(base_dir: Union[str, Path], spec: TreeSpec) -> Path:
    """Create files and directories below ``base_dir`` from ``spec``.

    A key maps to either a nested mapping (a directory), ``str`` content or
    ``bytes`` content (a file). ``None`` creates an empty file.

    Example:
        create_tree(tmp, {
            "a.txt": "alpha",
            "sub": {"b.txt": "beta", "c.log": ""},
        })

    Returns:
        ``base_dir`` as a Path
    """
    base = Path(base_dir)
    base.mkdir(parents=True, exist_ok=True)
    for name, content in spec.items():
        target = base / name
        if isinstance(content, Mapping):
            create_tree(target, content)
        elif isinstance(content, bytes):
            target.write_bytes(content)
        elif content is None:
            target.touch()
        else:
            target.write_text(str(content))
    return base


def enumerate_files(base_dir: Union[str, Path]) -> List[str]:
    """Every file below ``base_dir``, independently of the walker.

    Uses ``Path.rglob`` so tests can compare the walker's output against
    a second opinion.
    """
    return sorted(str(p.absolute()) for p in Path(base_dir).rglob('*') if p.is_file())


def relative_names(nodes, base_dir: Union[str, Path]) -> List[str]:
    """Sorted POSIX-style paths of ``nodes`` relative to ``base_dir``."""
    base = Path(base_dir).absolute()
    return sorted(Path(node.identifier()).relative_to(base).as_posix() for node in nodes)


SAMPLE_TREE: Dict[str, Any] = {
    "file1.txt": "content1",
    "file2.py": "# python file",
    "dir1": {
        "file3.txt": "content3",
        "file4.py": "# another python file",
        "subdir1": {
            "file5.txt": "content5",
        },
    },
    "dir2": {
        "file6.TXT": "content6",
    },
}
"""Layout shared by several tests:

base_dir/
├── file1.txt
├── file2.py
├── dir1/
│   ├── file3.txt
│   ├── file4.py
│   └── subdir1/
│       └── file5.txt
└── dir2/
    └── file6.TXT
"""
