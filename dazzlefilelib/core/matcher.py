"""Name matching for DazzleFileLib.

Turns wildcard strings (``*``, ``?``) and extension sets into compiled
regular expressions, and wraps them - or any callable - as node filters.
Pure functions, no I/O.
"""

import re
from abc import ABC, abstractmethod
from typing import Any, Callable, FrozenSet, Iterable, Optional, Pattern, Union

from .node import TreeNode


def wildcard_to_regex(pattern: str) -> str:
    """Translate a wildcard pattern into regular expression text.

    ``*`` becomes ``.*``, ``?`` becomes ``.``; everything else is escaped,
    so no input can produce an invalid expression.

    Args:
        pattern: Wildcard pattern, e.g. ``"file?.log"``

    Returns:
        Regular expression text, to be matched against the whole name
    """
    parts = []
    for char in pattern:
        if char == '*':
            parts.append('.*')
        elif char == '?':
            parts.append('.')
        else:
            parts.append(re.escape(char))
    return ''.join(parts)


def _normalize_extension(extension: str) -> str:
    return extension.strip().lstrip('.')


def extensions_to_regex(extensions: Iterable[str]) -> str:
    """Build the suffix expression for a set of file extensions.

    Args:
        extensions: Extensions with or without the leading dot

    Returns:
        Regular expression text anchored at the end, or ``""`` for an
        empty set
    """
    names = [_normalize_extension(ext) for ext in extensions]
    names = [name for name in names if name]
    if not names:
        return ""
    alternation = '|'.join(re.escape(name) for name in names)
    return rf".+\.(?:{alternation})$"


class CompiledPattern:
    """An immutable, compiled name pattern.

    Wildcard patterns must match the whole name. Extension patterns only
    need to match the end of it and ignore case.

    Attributes:
        source: The wildcard string or sorted extensions it was built from
        regex: The generated expression text
        anchored_start: True when the whole name must match
    """

    __slots__ = ('source', 'regex', 'anchored_start', '_compiled')

    def __init__(self, source: Any, regex: str, anchored_start: bool = True,
                 flags: int = 0):
        object.__setattr__(self, 'source', source)
        object.__setattr__(self, 'regex', regex)
        object.__setattr__(self, 'anchored_start', anchored_start)
        object.__setattr__(self, '_compiled', re.compile(regex, flags))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("CompiledPattern is immutable")

    @property
    def compiled(self) -> Pattern:
        return self._compiled

    def matches(self, name: str) -> bool:
        """Check a file name against the pattern."""
        if self.anchored_start:
            return self._compiled.fullmatch(name) is not None
        return self._compiled.search(name) is not None

    def __call__(self, node: TreeNode) -> bool:
        return self.matches(node.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CompiledPattern):
            return NotImplemented
        return (self.regex == other.regex
                and self.anchored_start == other.anchored_start
                and self._compiled.flags == other._compiled.flags)

    def __hash__(self) -> int:
        return hash((self.regex, self.anchored_start, self._compiled.flags))

    def __repr__(self) -> str:
        return f"CompiledPattern(source={self.source!r}, regex={self.regex!r})"


def compile_wildcard(pattern: str) -> CompiledPattern:
    """Compile a wildcard pattern. Never raises for any string."""
    return CompiledPattern(pattern, wildcard_to_regex(pattern), anchored_start=True,
                           flags=re.DOTALL)


def compile_extensions(extensions: Iterable[str]) -> CompiledPattern:
    """Compile an extension set into a case-insensitive suffix pattern.

    An empty set gives the empty expression, matched against whole names,
    so it matches no real file name.
    """
    if isinstance(extensions, str):
        extensions = [extensions]
    source: FrozenSet[str] = frozenset(extensions)
    regex = extensions_to_regex(sorted(source))
    if not regex:
        return CompiledPattern(source, "", anchored_start=True)
    return CompiledPattern(source, regex, anchored_start=False, flags=re.IGNORECASE)


PatternSpec = Union[str, Iterable[str], CompiledPattern]


def compile_pattern(spec: PatternSpec) -> CompiledPattern:
    """Compile a wildcard string or an extension collection.

    Args:
        spec: ``str`` (wildcard), iterable of extensions, or an already
            compiled pattern (returned unchanged)
    """
    if isinstance(spec, CompiledPattern):
        return spec
    if isinstance(spec, str):
        return compile_wildcard(spec)
    return compile_extensions(spec)


class NodeFilter(ABC):
    """Predicate over nodes.

    Used both as an inclusion matcher and as a member of an exclusion set.
    Any plain callable ``node -> bool`` is accepted in the same places;
    subclasses exist to give common predicates a name and a repr.
    """

    @abstractmethod
    def __call__(self, node: TreeNode) -> bool:
        pass


class WildcardFilter(NodeFilter):
    """Matches nodes whose name matches a wildcard pattern."""

    def __init__(self, pattern: str):
        self.pattern = compile_wildcard(pattern)

    def __call__(self, node: TreeNode) -> bool:
        return self.pattern.matches(node.name)

    def __repr__(self) -> str:
        return f"WildcardFilter({self.pattern.source!r})"


class ExtensionFilter(NodeFilter):
    """Matches files whose name ends in one of the given extensions.

    Directories never match, so an extension filter used for exclusion
    does not prune a directory that happens to be called ``build.tmp``.
    """

    def __init__(self, extensions: Iterable[str]):
        self.pattern = compile_extensions(extensions)

    def __call__(self, node: TreeNode) -> bool:
        return not node.is_directory and self.pattern.matches(node.name)

    def __repr__(self) -> str:
        return f"ExtensionFilter({sorted(self.pattern.source)!r})"


class NameFilter(NodeFilter):
    """Matches nodes by exact name, e.g. ``{'.git', '__pycache__'}``."""

    def __init__(self, names: Iterable[str], directories_only: bool = False):
        if isinstance(names, str):
            names = [names]
        self.names = frozenset(names)
        self.directories_only = directories_only

    def __call__(self, node: TreeNode) -> bool:
        if self.directories_only and not node.is_directory:
            return False
        return node.name in self.names

    def __repr__(self) -> str:
        return f"NameFilter({sorted(self.names)!r}, directories_only={self.directories_only})"


class PredicateFilter(NodeFilter):
    """Adapts an arbitrary callable to the NodeFilter interface."""

    def __init__(self, func: Callable[[TreeNode], bool], label: Optional[str] = None):
        self.func = func
        self.label = label or getattr(func, '__name__', 'predicate')

    def __call__(self, node: TreeNode) -> bool:
        return bool(self.func(node))

    def __repr__(self) -> str:
        return f"PredicateFilter({self.label})"


FilterSpec = Union[NodeFilter, CompiledPattern, Callable[[TreeNode], bool], str]


def as_filter(spec: FilterSpec) -> Callable[[TreeNode], bool]:
    """Normalise a filter specification into a node predicate.

    Strings are treated as wildcard patterns, compiled patterns test the
    node name, callables are used as they are.

    Raises:
        TypeError: If ``spec`` is none of the above
    """
    if isinstance(spec, str):
        return WildcardFilter(spec)
    if isinstance(spec, (NodeFilter, CompiledPattern)):
        return spec
    if callable(spec):
        return PredicateFilter(spec)
    raise TypeError(f"Cannot use {type(spec).__name__} as a node filter")
