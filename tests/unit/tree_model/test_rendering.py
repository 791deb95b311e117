"""Tests for plain-text size-tree rendering."""

from __future__ import annotations

import unittest

from dirsize.tree_model import DirectoryNode, FileEntry, format_size, render


def _sample_tree() -> DirectoryNode:
    return DirectoryNode(
        name="aaa",
        files=(FileEntry(name="bbb"), FileEntry(name="ccc")),
        subdirectories=(
            DirectoryNode(
                name="ddd",
                files=(FileEntry(name="fff"), FileEntry(name="ggg")),
            ),
            DirectoryNode(
                name="eee",
                files=(FileEntry(name="hhh"), FileEntry(name="iii")),
                subdirectories=(DirectoryNode(name="jjj"),),
            ),
        ),
    )


class RenderTests(unittest.TestCase):
    def test_render_lists_files_before_subdirectories_with_four_space_indent(self) -> None:
        expected = (
            "|- aaa (0)\n"
            "    |- bbb (0)\n"
            "    |- ccc (0)\n"
            "    |- ddd (0)\n"
            "        |- fff (0)\n"
            "        |- ggg (0)\n"
            "    |- eee (0)\n"
            "        |- hhh (0)\n"
            "        |- iii (0)\n"
            "        |- jjj (0)\n"
        )
        self.assertEqual(render(_sample_tree()), expected)

    def test_render_is_deterministic_and_matches_pretty(self) -> None:
        tree = _sample_tree()
        self.assertEqual(render(tree), render(tree))
        self.assertEqual(tree.pretty(), render(tree))

    def test_render_prints_sizes(self) -> None:
        tree = DirectoryNode(
            name="root",
            size=4106,
            own_size=4096,
            files=(FileEntry(name="a.txt", size=10),),
        )
        self.assertEqual(render(tree), "|- root (4106)\n    |- a.txt (10)\n")

    def test_render_human_readable_uses_size_labels(self) -> None:
        tree = DirectoryNode(name="root", size=2048, files=(FileEntry(name="big", size=2048),))
        self.assertEqual(
            render(tree, human_readable=True),
            "|- root (2.00 KB)\n    |- big (2.00 KB)\n",
        )

    def test_render_honors_custom_indent_width(self) -> None:
        tree = DirectoryNode(name="a", subdirectories=(DirectoryNode(name="b"),))
        self.assertEqual(render(tree, indent_width=2), "|- a (0)\n  |- b (0)\n")


class FormatSizeTests(unittest.TestCase):
    def test_format_size_scales_units(self) -> None:
        self.assertEqual(format_size(0), "0 B")
        self.assertEqual(format_size(512), "512.00 B")
        self.assertEqual(format_size(1536), "1.50 KB")
        self.assertEqual(format_size(5 * 1024**3), "5.00 GB")
        self.assertEqual(format_size(3 * 1024**5), "3.00 PB")


if __name__ == "__main__":
    unittest.main()
