"""Directory traversal engines producing aggregated size trees."""

from __future__ import annotations

from .options import WalkOptions
from .listing import DirectoryListing, build_node, list_directory, node_name
from .concurrent import walk
from .simple import walk_simple

__all__ = [
    "WalkOptions",
    "DirectoryListing",
    "build_node",
    "list_directory",
    "node_name",
    "walk",
    "walk_simple",
]
