"""Public package surface for dirsize.

Exports the traversal entry points, the tree model, and ``main`` for
programmatic CLI invocation.
"""

from __future__ import annotations

from .tree_model import DirectoryNode, FileEntry, render
from .walker import WalkOptions, walk, walk_simple


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "DirectoryNode",
    "FileEntry",
    "WalkOptions",
    "main",
    "render",
    "walk",
    "walk_simple",
]
