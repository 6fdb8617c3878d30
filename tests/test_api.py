"""
Tests for the high-level search functions.
Each function is exercised against the same sample tree:

    file1.txt, file2.py
    dir1/{file3.txt, file4.py, subdir1/file5.txt}
    dir2/file6.TXT
"""

import os
import shutil
import sys
import tempfile
import types
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlefilelib import (
    ConfigurationError,
    FileSystemNode,
    NameFilter,
    WalkConfig,
    contains_file,
    contains_file_recursive,
    count_all_files,
    find_files,
    find_files_excluding,
    find_files_matching,
    find_files_recursive,
    find_files_with_extensions,
    find_files_with_prefix_and_extension,
    find_line_index,
    get_all_files,
    get_root_directory,
    get_total_space,
    get_total_space_in_kilobytes,
    get_total_space_in_megabytes,
    list_dirs,
    make_walker,
    walk_files,
)
from dazzlefilelib.testing import SAMPLE_TREE, create_tree, relative_names


class ApiTestCase(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.root = create_tree(self.test_dir, SAMPLE_TREE)

    def tearDown(self):
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def names(self, nodes):
        return relative_names(nodes, self.root)


class TestWalkFiles(ApiTestCase):

    def test_is_lazy(self):
        result = walk_files(self.root, "*.py")
        self.assertIsInstance(result, types.GeneratorType)
        self.assertEqual(self.names(result), ["dir1/file4.py", "file2.py"])

    def test_invalid_options_raise_at_call(self):
        with self.assertRaises(ConfigurationError):
            walk_files(self.root, "*.py", match_directories=True)
        with self.assertRaises(ConfigurationError):
            walk_files(self.root, max_depth=0)

    def test_extra_config_options(self):
        nodes = walk_files(self.root, max_depth=1, include_directories=True)
        self.assertEqual(self.names(nodes), ["dir1", "dir2", "file1.txt", "file2.py"])

    def test_accepts_node_root(self):
        nodes = list(walk_files(FileSystemNode(self.root), recursive=False))
        self.assertEqual(len(nodes), 2)

    def test_make_walker_uses_config_options(self):
        walker = make_walker(WalkConfig(include_hidden=False, sort_children=False))
        self.assertFalse(walker.adapter.include_hidden)
        self.assertFalse(walker.adapter.sort_children)


class TestFindFiles(ApiTestCase):

    def test_non_recursive(self):
        self.assertEqual(self.names(find_files(self.root, "*.txt")), ["file1.txt"])

    def test_recursive(self):
        nodes = find_files(self.root, "*.txt", recursive=True)
        self.assertEqual(self.names(nodes),
                         ["dir1/file3.txt", "dir1/subdir1/file5.txt", "file1.txt"])

    def test_find_files_recursive_is_same_search(self):
        self.assertEqual(find_files_recursive(self.root, "file?.*"),
                         find_files(self.root, "file?.*", recursive=True))

    def test_returns_list_in_visit_order(self):
        nodes = find_files(self.root, recursive=True)
        self.assertIsInstance(nodes, list)
        self.assertEqual([n.name for n in nodes][:2], ["file3.txt", "file4.py"])

    def test_include_directories(self):
        nodes = find_files(self.root, "*.py", include_directories=True)
        self.assertEqual(self.names(nodes), ["dir1", "dir2", "file2.py"])

    def test_exclusion(self):
        nodes = find_files(self.root, "*.txt", recursive=True,
                           exclude_filters=[NameFilter("subdir1")])
        self.assertEqual(self.names(nodes), ["dir1/file3.txt", "file1.txt"])

    def test_missing_root(self):
        self.assertEqual(find_files(self.root / "missing", recursive=True), [])

    def test_with_extensions(self):
        nodes = find_files_with_extensions(self.root, ["txt"])
        self.assertEqual(self.names(nodes),
                         ["dir1/file3.txt", "dir1/subdir1/file5.txt",
                          "dir2/file6.TXT", "file1.txt"])

    def test_with_extensions_non_recursive(self):
        nodes = find_files_with_extensions(self.root, {"py", "txt"}, recursive=False)
        self.assertEqual(self.names(nodes), ["file1.txt", "file2.py"])

    def test_with_extensions_names_containing_spaces(self):
        create_tree(self.root, {"spaced": {"a .txt": "", "a b.txt": "", "a b.log": ""}})
        nodes = find_files_with_extensions(self.root / "spaced", ["txt"])
        self.assertEqual(sorted(n.name for n in nodes), ["a .txt", "a b.txt"])

    def test_with_no_extensions(self):
        self.assertEqual(find_files_with_extensions(self.root, []), [])


class TestPredicateSearches(ApiTestCase):

    def test_matching_tests_directories(self):
        result = find_files_matching(self.root, lambda n: n.name.startswith("dir"))
        self.assertIsInstance(result, set)
        self.assertEqual(self.names(result), ["dir1", "dir2"])

    def test_matching_recursive(self):
        result = find_files_matching(self.root, lambda n: "1" in n.name, recursive=True)
        self.assertEqual(self.names(result), ["dir1", "dir1/subdir1", "file1.txt"])

    def test_excluding(self):
        result = find_files_excluding(self.root, NameFilter("dir1"), "*.py")
        self.assertEqual(self.names(result), ["dir2/file6.TXT", "file1.txt"])

    def test_excluding_nothing(self):
        self.assertEqual(len(find_files_excluding(self.root)), 6)

    def test_prefix_and_extension(self):
        nodes = find_files_with_prefix_and_extension(self.root, "file", "txt")
        self.assertEqual(self.names(nodes), ["file1.txt"])
        nodes = find_files_with_prefix_and_extension(self.root, "file", ".txt",
                                                     recursive=True)
        self.assertEqual(self.names(nodes),
                         ["dir1/file3.txt", "dir1/subdir1/file5.txt", "file1.txt"])

    def test_prefix_is_literal(self):
        self.assertEqual(find_files_with_prefix_and_extension(self.root, "f*", "txt"), [])
        self.assertEqual(find_files_with_prefix_and_extension(self.root, "file?", "txt"), [])


class TestEnumeration(ApiTestCase):

    def test_get_all_files(self):
        self.assertEqual(self.names(get_all_files(self.root)), ["file1.txt", "file2.py"])
        self.assertEqual(len(get_all_files(self.root, recursive=True)), 6)

    def test_get_all_files_with_directories(self):
        nodes = get_all_files(self.root, include_directories=True)
        self.assertEqual(self.names(nodes), ["dir1", "dir2", "file1.txt", "file2.py"])

    def test_count(self):
        self.assertEqual(count_all_files(self.root), 6)
        self.assertEqual(count_all_files(self.root, include_directories=True), 9)

    def test_count_non_recursive(self):
        self.assertEqual(count_all_files(self.root, recursive=False), 2)
        self.assertEqual(count_all_files(self.root, include_directories=True,
                                         recursive=False), 4)

    def test_count_with_exclusion(self):
        self.assertEqual(count_all_files(self.root, include_directories=True,
                                         exclude_filters=[NameFilter("dir1")]), 4)

    def test_count_missing_root(self):
        self.assertEqual(count_all_files(self.root / "missing", True), 0)

    def test_list_dirs(self):
        self.assertEqual(self.names(list_dirs(self.root)), ["dir1", "dir2"])
        self.assertEqual(list_dirs(self.root / "file1.txt"), [])


class TestContains(ApiTestCase):

    def test_contains_file_by_name(self):
        self.assertTrue(contains_file(self.root, "file1.txt"))
        self.assertTrue(contains_file(self.root, Path("elsewhere") / "dir1"))
        self.assertFalse(contains_file(self.root, "file3.txt"))

    def test_contains_file_missing_parent(self):
        self.assertFalse(contains_file(self.root / "missing", "file1.txt"))

    def test_contains_file_recursive(self):
        self.assertTrue(contains_file_recursive(self.root,
                                                self.root / "dir1" / "subdir1" / "file5.txt"))
        self.assertTrue(contains_file_recursive(self.root, self.root / "dir2"))
        self.assertFalse(contains_file_recursive(self.root, self.root / "file9.txt"))

    def test_contains_file_recursive_compares_full_path(self):
        other = Path(self.test_dir) / "file5.txt"
        self.assertFalse(contains_file_recursive(self.root, other))


class TestMisc(ApiTestCase):

    def test_root_directory(self):
        root_dir = get_root_directory(self.root / "dir1")
        self.assertEqual(root_dir, Path(self.root.absolute().anchor))
        self.assertEqual(root_dir.parent, root_dir)

    def test_find_line_index(self):
        path = self.root / "lines.txt"
        path.write_text("alpha\nbeta=1\ngamma\nbeta=2\n")
        self.assertEqual(find_line_index(path, "beta"), 1)
        self.assertEqual(find_line_index(path, "alpha"), 0)
        self.assertEqual(find_line_index(path, "delta"), -1)

    def test_find_line_index_missing_file(self):
        with self.assertRaises(OSError):
            find_line_index(self.root / "absent.txt", "x")

    def test_total_space(self):
        total = shutil.disk_usage(self.root).total
        self.assertEqual(get_total_space(self.root), total)
        self.assertEqual(get_total_space_in_kilobytes(self.root), total // 1024)
        self.assertEqual(get_total_space_in_megabytes(self.root), total // (1024 * 1024))

    def test_total_space_missing_root_is_zero(self):
        missing = os.path.join(self.test_dir, "missing")
        self.assertEqual(get_total_space(missing), 0)
        self.assertEqual(get_total_space_in_kilobytes(missing), 0)
        self.assertEqual(get_total_space_in_megabytes(missing), 0)


if __name__ == '__main__':
    unittest.main()
