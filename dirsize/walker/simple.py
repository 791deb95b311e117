"""Single-threaded reference traversal, kept as a correctness baseline."""

from __future__ import annotations

import os
from pathlib import Path

from ..tree_model import DirectoryNode
from .listing import build_node, list_directory


def walk_simple(path: str | os.PathLike[str]) -> DirectoryNode:
    """Walk ``path`` recursively on the calling thread.

    Produces the same tree as :func:`dirsize.walker.walk`; the first
    ``OSError`` aborts the walk and propagates unchanged.
    """
    listing = list_directory(Path(path))
    subdirectories = [walk_simple(child) for child in listing.subdirectories]
    return build_node(listing, subdirectories)


__all__ = ["walk_simple"]
