"""Concurrent directory traversal with one thread per subdirectory.

A traversal unit lists its directory, starts a unit for every subdirectory
and drains a queue private to that call. Each child puts its outcomes (a
finished node or an exception) followed by a finished marker, so the
unit's pending counter reaches zero only after every outcome was seen.
Errors are forwarded to the parent as they arrive; a unit that saw one
publishes no node.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from queue import Queue

from ..tree_model import DirectoryNode
from .listing import build_node, list_directory
from .options import WalkOptions

logger = logging.getLogger(__name__)

_UNIT_FINISHED = object()


class _WalkContext:
    """Cancellation flag and concurrency slots shared by all units of one walk."""

    def __init__(self, options: WalkOptions) -> None:
        self.options = options
        self.cancelled = threading.Event()
        self._slots: threading.BoundedSemaphore | None = None
        if options.max_concurrency is not None:
            self._slots = threading.BoundedSemaphore(options.max_concurrency)

    def fail(self) -> None:
        """Record a unit failure; stops pending units when cancellation is on."""
        if self.options.cancel_on_error:
            self.cancelled.set()

    def try_acquire_slot(self) -> bool:
        if self._slots is None:
            return True
        return self._slots.acquire(blocking=False)

    def release_slot(self) -> None:
        if self._slots is not None:
            self._slots.release()


def _run_unit(path: Path, context: _WalkContext, report: Queue[object]) -> None:
    """Walk ``path`` and put its node, or any errors, on ``report``."""
    if context.cancelled.is_set():
        logger.debug("skipping %s: walk cancelled", path)
        return

    try:
        listing = list_directory(path)
    except OSError as exc:
        logger.debug("walk unit failed for %s: %s", path, exc)
        context.fail()
        report.put(exc)
        return

    outcomes: Queue[object] = Queue()
    pending = 0
    failed = False
    for child in listing.subdirectories:
        if context.cancelled.is_set():
            break
        try:
            _spawn_unit(child, context, outcomes)
        except RuntimeError as exc:
            logger.debug("could not start walk unit for %s: %s", child, exc)
            context.fail()
            report.put(exc)
            failed = True
            break
        pending += 1

    subdirectories: list[DirectoryNode] = []
    while pending:
        outcome = outcomes.get()
        if outcome is _UNIT_FINISHED:
            pending -= 1
        elif isinstance(outcome, DirectoryNode):
            subdirectories.append(outcome)
        else:
            failed = True
            report.put(outcome)

    if failed or context.cancelled.is_set():
        return
    report.put(build_node(listing, subdirectories))


def _unit_main(path: Path, context: _WalkContext, report: Queue[object], *, owns_slot: bool) -> None:
    try:
        _run_unit(path, context, report)
    except Exception as exc:
        logger.debug("walk unit crashed for %s", path, exc_info=True)
        context.fail()
        report.put(exc)
    finally:
        if owns_slot:
            context.release_slot()
        report.put(_UNIT_FINISHED)


def _spawn_unit(path: Path, context: _WalkContext, report: Queue[object]) -> threading.Thread | None:
    """Start a unit for ``path`` on a new thread, or inline when no slot is free.

    Either way the unit ends by putting the finished marker on ``report``.
    """
    if not context.try_acquire_slot():
        logger.debug("concurrency limit reached, walking %s inline", path)
        _unit_main(path, context, report, owns_slot=False)
        return None

    thread = threading.Thread(
        target=_unit_main,
        args=(path, context, report),
        kwargs={"owns_slot": True},
        name="dirsize-walk-unit",
        daemon=True,
    )
    try:
        thread.start()
    except RuntimeError:
        context.release_slot()
        raise
    return thread


def walk(path: str | os.PathLike[str], options: WalkOptions | None = None) -> DirectoryNode:
    """Walk ``path`` concurrently and return its fully aggregated node.

    Raises the first error observed anywhere in the tree, unchanged. With
    ``options.cancel_on_error`` the remaining units are cancelled and the
    root unit is joined before raising; otherwise they keep running in the
    background.
    """
    options = options or WalkOptions()
    context = _WalkContext(options)
    report: Queue[object] = Queue()
    root_unit = _spawn_unit(Path(path), context, report)

    outcome = report.get()
    if isinstance(outcome, DirectoryNode):
        if root_unit is not None:
            root_unit.join()
        return outcome
    if outcome is _UNIT_FINISHED:
        raise RuntimeError(f"walk of {path} finished without a result")

    assert isinstance(outcome, BaseException)
    if options.cancel_on_error:
        context.cancelled.set()
        if root_unit is not None:
            root_unit.join()
    raise outcome


__all__ = ["walk"]
