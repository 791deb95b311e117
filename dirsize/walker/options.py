"""Explicit traversal settings passed into the walk entry point."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class WalkOptions:
    """Concurrency and failure settings for one traversal.

    ``max_concurrency`` caps live background units; ``None`` means one thread
    per subdirectory with no bound. ``cancel_on_error`` stops units that have
    not started their I/O once any unit fails.
    """

    max_concurrency: int | None = None
    cancel_on_error: bool = True

    def __post_init__(self) -> None:
        if self.max_concurrency is not None and self.max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")


__all__ = ["WalkOptions"]
