"""Domain datatypes for aggregated directory-size trees."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileEntry:
    """One non-directory child with the size reported by ``lstat``."""

    name: str
    size: int = 0


@dataclass(frozen=True)
class DirectoryNode:
    """Directory with its recursive total size and nested children.

    ``size`` is ``own_size`` plus every file size plus every subdirectory's
    recursive size. Nodes are built in one step once all children are known.
    """

    name: str
    size: int = 0
    subdirectories: tuple["DirectoryNode", ...] = ()
    files: tuple[FileEntry, ...] = ()
    own_size: int = 0

    def pretty(self) -> str:
        """Return the indented text rendering of this tree."""
        from .rendering import render

        return render(self)


__all__ = [
    "FileEntry",
    "DirectoryNode",
]
