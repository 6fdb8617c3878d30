"""Byte, text and line oriented file helpers.

These are the small read/write utilities the search functions lean on.
Errors propagate as ``OSError``. The ``*_quietly`` variants are for
callers that accept best-effort semantics: they turn ``OSError`` into an
unchecked QuietIOError that carries the original cause.
"""

import hashlib
import logging
import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from .directory import make_parent_dirs
from .errors import QuietIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_ENCODING = "utf-8"
CHUNK_SIZE = 64 * 1024


def read_bytes(file: PathLike) -> bytes:
    return Path(file).read_bytes()


def read_text(file: PathLike, encoding: str = DEFAULT_ENCODING) -> str:
    return Path(file).read_text(encoding=encoding)


def read_lines(file: PathLike, encoding: str = DEFAULT_ENCODING) -> List[str]:
    """Read a text file into a list of lines without line terminators."""
    with open(file, 'r', encoding=encoding, newline=None) as handle:
        return handle.read().splitlines()


def write_bytes(file: PathLike, data: bytes) -> None:
    Path(file).write_bytes(data)


def write_text(file: PathLike, text: str, encoding: str = DEFAULT_ENCODING) -> None:
    Path(file).write_text(text, encoding=encoding)


def write_lines(file: PathLike, lines: Iterable[str],
                encoding: str = DEFAULT_ENCODING) -> None:
    """Write each string as one line, terminated by ``\\n``."""
    with open(file, 'w', encoding=encoding) as handle:
        for line in lines:
            handle.write(line)
            handle.write('\n')


def copy_file(source: PathLike, destination: PathLike,
              create_parents: bool = False) -> Path:
    """Copy the bytes of ``source`` to ``destination``.

    Args:
        source: File to read
        destination: File to write (overwritten if present)
        create_parents: Create missing parent directories of ``destination``

    Returns:
        The destination path
    """
    if create_parents:
        make_parent_dirs(destination)
    with open(source, 'rb') as src, open(destination, 'wb') as dst:
        shutil.copyfileobj(src, dst, CHUNK_SIZE)
    return Path(destination)


def modify_file(source: PathLike, destination: PathLike,
                transform: Callable[[int, str], str],
                encoding: str = DEFAULT_ENCODING) -> int:
    """Rewrite ``source`` line by line into ``destination``.

    ``transform(index, line)`` receives each line without its terminator
    and returns the replacement; a newline is appended unless the returned
    text already ends with one.

    Returns:
        Number of lines processed
    """
    count = 0
    with open(source, 'r', encoding=encoding) as src, \
            open(destination, 'w', encoding=encoding) as dst:
        for count, line in enumerate(src, start=1):
            altered = transform(count - 1, line.rstrip('\r\n'))
            dst.write(altered)
            if not altered.endswith('\n'):
                dst.write('\n')
    return count


def checksum(file: PathLike, algorithm: str = "md5") -> str:
    """Hex digest of a file's content.

    Raises:
        ValueError: If ``algorithm`` is not known to hashlib
    """
    try:
        digest = hashlib.new(algorithm)
    except ValueError:
        raise ValueError(f"Unknown checksum algorithm: {algorithm}") from None
    with open(file, 'rb') as handle:
        for chunk in iter(lambda: handle.read(CHUNK_SIZE), b''):
            digest.update(chunk)
    return digest.hexdigest()


def bytes_checksum(data: bytes, algorithm: str = "md5") -> str:
    return hashlib.new(algorithm, data).hexdigest()


@dataclass(frozen=True)
class FileContentInfo:
    """Snapshot of one file: where it lives, what it holds, and its MD5.

    Value object; two snapshots are equal when every field is equal.

    Attributes:
        name: File name without directory
        path: Absolute path of the containing directory
        checksum: MD5 hex digest of ``content`` (None if the file was missing)
        content: File bytes (None if the file was missing)
    """
    name: str
    path: str
    checksum: Optional[str] = None
    content: Optional[bytes] = None

    @classmethod
    def from_bytes(cls, name: str, path: str, content: bytes) -> 'FileContentInfo':
        return cls(name, path, bytes_checksum(content), content)

    @property
    def file_path(self) -> Path:
        return Path(self.path) / self.name


def to_file_content_info(file: PathLike) -> FileContentInfo:
    """Snapshot ``file``.

    A missing file gives a snapshot with name and path only.

    Raises:
        OSError: If the file exists but cannot be read
    """
    file_path = Path(file).absolute()
    if not file_path.exists():
        return FileContentInfo(file_path.name, str(file_path.parent))
    return FileContentInfo(file_path.name, str(file_path.parent),
                           checksum(file_path), read_bytes(file_path))


def to_file(info: FileContentInfo) -> Path:
    """Write a snapshot's content back to ``path/name``.

    Missing parent directories are created. A snapshot without content
    writes an empty file.

    Returns:
        The written file
    """
    target = info.file_path
    make_parent_dirs(target)
    write_bytes(target, info.content or b'')
    return target


# Quiet variants

def _quietly(operation: str, path: PathLike, func: Callable, *args, **kwargs):
    try:
        return func(*args, **kwargs)
    except OSError as e:
        logger.debug("%s failed for %s: %s", operation, path, e)
        raise QuietIOError(f"{operation} failed for {path}: {e}") from e


def read_text_quietly(file: PathLike, encoding: str = DEFAULT_ENCODING) -> str:
    return _quietly("read", file, read_text, file, encoding)


def write_text_quietly(file: PathLike, text: str, encoding: str = DEFAULT_ENCODING) -> None:
    _quietly("write", file, write_text, file, text, encoding)


def write_bytes_quietly(file: PathLike, data: bytes) -> None:
    _quietly("write", file, write_bytes, file, data)


def write_lines_quietly(file: PathLike, lines: Iterable[str],
                        encoding: str = DEFAULT_ENCODING) -> None:
    _quietly("write", file, write_lines, file, lines, encoding)


def copy_file_quietly(source: PathLike, destination: PathLike,
                      create_parents: bool = False) -> Path:
    return _quietly("copy", source, copy_file, source, destination, create_parents)
