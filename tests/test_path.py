"""
Unit tests for lexical path normalization
"""

import unittest
import os
import sys
from pathlib import Path, PurePosixPath, PureWindowsPath

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from toolbox.vfs.path import normalize, is_contained

class TestNormalize(unittest.TestCase):
    """Test normalize() on literal cases"""

    CASES = [
        ("", "."),
        (".", "."),
        ("..", ".."),
        ("../.", ".."),
        ("../..", "../.."),
        ("../../..", "../../.."),
        ("./dir", "dir"),
        ("../dir", "../dir"),
        ("../dir/..", ".."),
        ("./first/second/..", "first"),
        ("first/./second", "first/second"),
        ("first/..", "."),
        ("first/../..", ".."),
        ("a/b/../../c", "c"),
    ]

    def test_literal_cases(self):
        """Test the documented normalization results"""
        for raw, expected in self.CASES:
            with self.subTest(path=raw):
                self.assertEqual(normalize(PurePosixPath(raw)), PurePosixPath(expected))

    def test_string_input_returns_path(self):
        """Test that string input produces a concrete Path"""
        result = normalize("first/./second")
        self.assertIsInstance(result, Path)
        self.assertEqual(result, Path("first/second"))

    def test_idempotence(self):
        """Test that normalizing twice changes nothing"""
        samples = [raw for raw, _ in self.CASES] + ["/a/../b/./c", "/..", "x/../../y/z/.."]
        for raw in samples:
            with self.subTest(path=raw):
                once = normalize(PurePosixPath(raw))
                self.assertEqual(normalize(once), once)

    def test_normalized_output_has_no_inner_parent_refs(self):
        """Test that `..` only survives as a leading run"""
        for raw in ["../a/../b/..", "a/b/c/../../..", "../../x/y/../z"]:
            with self.subTest(path=raw):
                parts = normalize(PurePosixPath(raw)).parts
                leading = len(parts) - len(list(dropwhile_parent(parts)))
                self.assertNotIn("..", parts[leading:])
                self.assertNotIn(".", parts)

    def test_root_is_not_cancellable(self):
        """Test that `..` cannot remove the root of an anchored path"""
        self.assertEqual(normalize(PurePosixPath("/..")), PurePosixPath("/"))
        self.assertEqual(normalize(PurePosixPath("/a/../../b")), PurePosixPath("/b"))
        self.assertEqual(normalize(PurePosixPath("/a/b/..")), PurePosixPath("/a"))

    def test_single_component_unchanged(self):
        """Test that a single component is returned as-is"""
        self.assertEqual(normalize(PurePosixPath("/")), PurePosixPath("/"))
        self.assertEqual(normalize(PurePosixPath("name")), PurePosixPath("name"))

    def test_windows_drive_is_kept(self):
        """Test that a drive prefix stays the first component"""
        result = normalize(PureWindowsPath("C:\\Users\\..\\..\\Temp"))
        self.assertEqual(result, PureWindowsPath("C:\\Temp"))
        self.assertIsInstance(result, PureWindowsPath)

def dropwhile_parent(parts):
    """Yield parts after the leading run of `..`"""
    iterator = iter(parts)
    for part in iterator:
        if part != "..":
            yield part
            break
    yield from iterator

class TestIsContained(unittest.TestCase):
    """Test component-prefix containment"""

    def test_contained(self):
        self.assertTrue(is_contained(PurePosixPath("/srv/data"), PurePosixPath("/srv/data")))
        self.assertTrue(is_contained(PurePosixPath("/srv/data/x/y"), PurePosixPath("/srv/data")))

    def test_not_contained(self):
        self.assertFalse(is_contained(PurePosixPath("/srv"), PurePosixPath("/srv/data")))
        self.assertFalse(is_contained(PurePosixPath("/etc/passwd"), PurePosixPath("/srv/data")))

    def test_sibling_with_common_string_prefix(self):
        """Test that containment compares components, not characters"""
        self.assertFalse(is_contained(PurePosixPath("/srv/database"), PurePosixPath("/srv/data")))

if __name__ == '__main__':
    unittest.main()
