"""
Tests for whitespace trimming.
"""

import unittest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from netstrutils import trimr, trimr_str


class TestTrimr(unittest.TestCase):

    def test_trailing_whitespace_removed_in_place(self):
        buf = bytearray(b"  hello   ")
        self.assertIsNone(trimr(buf))
        self.assertEqual(buf, bytearray(b"  hello"))

    def test_all_isspace_characters(self):
        buf = bytearray(b"x \t\n\v\f\r")
        trimr(buf)
        self.assertEqual(buf, bytearray(b"x"))

    def test_empty_buffer(self):
        buf = bytearray()
        trimr(buf)
        self.assertEqual(buf, bytearray())

    def test_whitespace_only_buffer(self):
        buf = bytearray(b" \r\n")
        trimr(buf)
        self.assertEqual(len(buf), 0)

    def test_nothing_to_trim(self):
        buf = bytearray(b"a b")
        trimr(buf)
        self.assertEqual(buf, bytearray(b"a b"))

    def test_rejects_immutable_input(self):
        with self.assertRaises(TypeError):
            trimr(b"abc ")
        with self.assertRaises(TypeError):
            trimr("abc ")


class TestTrimrStr(unittest.TestCase):

    def test_examples(self):
        self.assertEqual(trimr_str("  hello   "), "  hello")
        self.assertEqual(trimr_str(""), "")
        self.assertEqual(trimr_str("line\r\n"), "line")

    def test_only_c_whitespace(self):
        # Non-breaking space is not in the isspace() set
        self.assertEqual(trimr_str("a\u00a0"), "a\u00a0")


if __name__ == '__main__':
    unittest.main()
