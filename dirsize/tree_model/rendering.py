"""Plain-text rendering of aggregated directory trees.

Each node prints as ``|- name (size)``; files come before subdirectories
and every depth level is indented by a fixed number of spaces.
"""

from __future__ import annotations

from .types import DirectoryNode

INDENT_WIDTH = 4
SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def format_size(size_bytes: int) -> str:
    """Format a byte count as a human-readable label."""
    if size_bytes == 0:
        return "0 B"

    value = float(size_bytes)
    for unit in SIZE_UNITS:
        if value < 1024.0:
            return f"{value:.2f} {unit}"
        value /= 1024.0
    return f"{value:.2f} PB"


def render(
    node: DirectoryNode,
    *,
    indent_width: int = INDENT_WIDTH,
    human_readable: bool = False,
) -> str:
    """Render ``node`` depth-first, pre-order, one entry per line."""
    size_label = format_size if human_readable else str
    out: list[str] = []

    def write(indent: int, name: str, size: int) -> None:
        out.append(f"{' ' * indent}|- {name} ({size_label(size)})\n")

    def walk(directory: DirectoryNode, indent: int) -> None:
        write(indent, directory.name, directory.size)
        for entry in directory.files:
            write(indent + indent_width, entry.name, entry.size)
        for child in directory.subdirectories:
            walk(child, indent + indent_width)

    walk(node, 0)
    return "".join(out)


__all__ = [
    "INDENT_WIDTH",
    "format_size",
    "render",
]
