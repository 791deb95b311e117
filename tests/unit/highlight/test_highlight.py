"""Tests for Pygments-based size-tree coloring."""

from __future__ import annotations

import re
import unittest

from dirsize.highlight import colorize_tree, normalize_style
from dirsize.tree_model import DirectoryNode, FileEntry, render

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


class ColorizeTreeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.text = render(
            DirectoryNode(
                name="root (copy)",
                size=42,
                files=(FileEntry(name="a.txt", size=40),),
                subdirectories=(DirectoryNode(name="sub", size=2),),
            )
        )

    def test_colorize_adds_ansi_and_preserves_text(self) -> None:
        colored = colorize_tree(self.text, "monokai")
        self.assertIn("\x1b[", colored)
        self.assertEqual(ANSI_ESCAPE_RE.sub("", colored), self.text)

    def test_unknown_style_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_style("no-such-style"), "monokai")
        self.assertEqual(normalize_style("native"), "native")
        colored = colorize_tree(self.text, "no-such-style")
        self.assertEqual(ANSI_ESCAPE_RE.sub("", colored), self.text)

    def test_empty_text_is_returned_unchanged(self) -> None:
        self.assertEqual(colorize_tree(""), "")


if __name__ == "__main__":
    unittest.main()
