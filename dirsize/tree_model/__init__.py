"""Domain model for aggregated directory-size trees.

This package contains the non-concurrent tree primitives:
- file/directory datatypes with recursive sizes
- the plain-text renderer consumed by the CLI
"""

from __future__ import annotations

from .types import DirectoryNode, FileEntry
from .rendering import INDENT_WIDTH, format_size, render

__all__ = [
    "DirectoryNode",
    "FileEntry",
    "INDENT_WIDTH",
    "format_size",
    "render",
]
