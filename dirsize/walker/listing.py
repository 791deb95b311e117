"""Filesystem listing shared by the concurrent and reference walkers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..tree_model import DirectoryNode, FileEntry


@dataclass(frozen=True)
class DirectoryListing:
    """Own metadata size plus immediate children of one directory."""

    name: str
    own_size: int
    files: tuple[FileEntry, ...]
    subdirectories: tuple[Path, ...]


def node_name(path: Path) -> str:
    """Return the display name for ``path`` (its last component)."""
    name = os.path.basename(os.path.normpath(path))
    return name or str(path)


def list_directory(path: Path) -> DirectoryListing:
    """``lstat`` ``path`` and list its children without following symlinks.

    Children are sorted by name. Any stat/list failure raises ``OSError``.
    """
    own_size = int(os.lstat(path).st_size)
    files: list[FileEntry] = []
    subdirectories: list[Path] = []
    with os.scandir(path) as entries:
        for entry in entries:
            if entry.is_dir(follow_symlinks=False):
                subdirectories.append(Path(entry.path))
                continue
            files.append(FileEntry(name=entry.name, size=int(entry.stat(follow_symlinks=False).st_size)))

    files.sort(key=lambda item: item.name)
    subdirectories.sort(key=lambda item: item.name)
    return DirectoryListing(
        name=node_name(path),
        own_size=own_size,
        files=tuple(files),
        subdirectories=tuple(subdirectories),
    )


def build_node(listing: DirectoryListing, subdirectories: list[DirectoryNode]) -> DirectoryNode:
    """Assemble the finished node for ``listing`` from its aggregated children."""
    ordered = tuple(sorted(subdirectories, key=lambda node: node.name))
    size = listing.own_size
    size += sum(entry.size for entry in listing.files)
    size += sum(node.size for node in ordered)
    return DirectoryNode(
        name=listing.name,
        size=size,
        subdirectories=ordered,
        files=listing.files,
        own_size=listing.own_size,
    )


__all__ = [
    "DirectoryListing",
    "node_name",
    "list_directory",
    "build_node",
]
