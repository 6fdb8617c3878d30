"""Unit tests for wildcard and extension matching.

Pure name matching, no file system access except for node names.
"""

import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlefilelib import (
    CompiledPattern,
    ExtensionFilter,
    FileSystemNode,
    NameFilter,
    PredicateFilter,
    WildcardFilter,
    as_filter,
    compile_extensions,
    compile_pattern,
    compile_wildcard,
    extensions_to_regex,
    wildcard_to_regex,
)


class TestWildcard:
    """Wildcard patterns must match whole names."""

    def test_star_matches_any_run(self):
        pattern = compile_wildcard("*.txt")
        assert pattern.matches("a.txt")
        assert pattern.matches("a.b.txt")
        assert pattern.matches(".txt")
        assert not pattern.matches("a.txtx")
        assert not pattern.matches("a.txt.bak")

    def test_question_mark_matches_exactly_one(self):
        pattern = compile_wildcard("file?.log")
        assert pattern.matches("file1.log")
        assert not pattern.matches("file12.log")
        assert not pattern.matches("file.log")

    def test_regex_metacharacters_are_literal(self):
        pattern = compile_wildcard("report(1)+[draft].md")
        assert pattern.matches("report(1)+[draft].md")
        assert not pattern.matches("report1.md")

    def test_dot_is_not_a_wildcard(self):
        pattern = compile_wildcard("a.c")
        assert pattern.matches("a.c")
        assert not pattern.matches("abc")

    def test_malformed_patterns_never_raise(self):
        for text in ["[", "(", "\\", "a{2", "**", "", "?*?"]:
            pattern = compile_wildcard(text)
            assert isinstance(pattern, CompiledPattern)

    def test_empty_pattern_matches_only_empty_name(self):
        pattern = compile_wildcard("")
        assert pattern.matches("")
        assert not pattern.matches("a")

    def test_case_sensitive(self):
        assert not compile_wildcard("*.txt").matches("A.TXT")

    def test_regex_text(self):
        assert wildcard_to_regex("*.txt") == r".*\.txt"
        assert wildcard_to_regex("a?b") == "a.b"


class TestExtensions:
    """Extension sets match name suffixes, ignoring case."""

    def test_case_insensitive(self):
        pattern = compile_extensions({"TXT"})
        assert pattern.matches("a.txt")
        assert pattern.matches("A.TXT")
        assert not pattern.matches("a.log")

    def test_several_extensions(self):
        pattern = compile_extensions(["txt", "log"])
        assert pattern.matches("x.txt")
        assert pattern.matches("x.LOG")
        assert not pattern.matches("x.csv")

    def test_leading_dot_is_optional(self):
        assert compile_extensions([".py"]).matches("setup.py")
        assert compile_extensions(["py"]).matches("setup.py")

    def test_suffix_only(self):
        pattern = compile_extensions(["txt"])
        assert not pattern.matches("a.txt.bak")
        assert not pattern.matches("txt")
        assert not pattern.matches("atxt")

    def test_whitespace_in_name(self):
        pattern = compile_extensions(["txt"])
        assert pattern.matches("a b.txt")
        assert pattern.matches("a .txt")
        assert pattern.matches(" .txt")
        assert pattern.matches("my notes.TXT")

    def test_regex_text(self):
        assert extensions_to_regex(["txt"]) == r".+\.(?:txt)$"

    def test_extension_is_escaped(self):
        pattern = compile_extensions(["c++"])
        assert pattern.matches("main.c++")
        assert not pattern.matches("main.cc")

    def test_empty_set_matches_nothing(self):
        pattern = compile_extensions([])
        assert pattern.regex == ""
        assert not pattern.matches("a.txt")
        assert not pattern.matches("anything")
        assert extensions_to_regex([]) == ""

    def test_single_string_is_one_extension(self):
        assert compile_extensions("md").matches("README.md")


class TestCompiledPattern:

    def test_immutable(self):
        pattern = compile_wildcard("*.txt")
        with pytest.raises(AttributeError):
            pattern.regex = "x"

    def test_equality(self):
        assert compile_wildcard("*.txt") == compile_wildcard("*.txt")
        assert compile_wildcard("*.txt") != compile_wildcard("*.log")
        assert len({compile_wildcard("a"), compile_wildcard("a")}) == 1

    def test_compile_pattern_dispatch(self):
        assert compile_pattern("*.txt").anchored_start
        assert not compile_pattern(["txt"]).anchored_start
        existing = compile_wildcard("x")
        assert compile_pattern(existing) is existing

    def test_callable_on_nodes(self, tmp_path):
        node = FileSystemNode(tmp_path / "a.txt", is_directory=False)
        assert compile_wildcard("*.txt")(node)


class TestFilters:

    def test_wildcard_filter(self, tmp_path):
        assert WildcardFilter("*.log")(FileSystemNode(tmp_path / "x.log", is_directory=False))

    def test_extension_filter_ignores_directories(self, tmp_path):
        filt = ExtensionFilter(["tmp"])
        assert filt(FileSystemNode(tmp_path / "a.tmp", is_directory=False))
        assert not filt(FileSystemNode(tmp_path / "build.tmp", is_directory=True))

    def test_name_filter(self, tmp_path):
        filt = NameFilter({".git", "__pycache__"}, directories_only=True)
        assert filt(FileSystemNode(tmp_path / ".git", is_directory=True))
        assert not filt(FileSystemNode(tmp_path / ".git", is_directory=False))
        assert not filt(FileSystemNode(tmp_path / "src", is_directory=True))

    def test_predicate_filter(self, tmp_path):
        filt = PredicateFilter(lambda node: node.name.startswith("a"), label="starts-with-a")
        assert filt(FileSystemNode(tmp_path / "abc", is_directory=False))
        assert "starts-with-a" in repr(filt)

    def test_as_filter(self, tmp_path):
        node = FileSystemNode(tmp_path / "a.txt", is_directory=False)
        assert as_filter("*.txt")(node)
        assert as_filter(compile_extensions(["TXT"]))(node)
        assert as_filter(lambda n: True)(node)
        with pytest.raises(TypeError):
            as_filter(42)
