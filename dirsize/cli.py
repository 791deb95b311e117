"""Command-line front door for dirsize.

Parses CLI options, merges them with config defaults, and walks the target
directory. Prints the rendered size tree or exits non-zero on I/O errors.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .highlight import colorize_tree
from .tree_model import render
from .walker import WalkOptions, walk

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirsize",
        description="Print the recursive size of a directory tree, scanning subdirectories concurrently.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to measure. Defaults to current directory.")
    parser.add_argument("--dir", dest="dir_path", metavar="PATH", default=None, help="Directory to measure (alias for PATH).")
    parser.add_argument(
        "--max-concurrency",
        type=_positive_int,
        default=None,
        help="Cap on concurrently running walk threads (default: unbounded).",
    )
    parser.add_argument(
        "--no-cancel",
        action="store_true",
        help="Let sibling scans finish after the first error instead of cancelling them.",
    )
    parser.add_argument("-H", "--human-readable", action="store_true", help="Print sizes as KB/MB/GB labels.")
    parser.add_argument("--style", default=None, help="Pygments style name for colored output.")
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log traversal details to stderr.")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def write_output(text: str) -> None:
    """Write ``text`` to stdout as UTF-8, passing undecodable filename bytes through unchanged."""
    sys.stdout.flush()
    sys.stdout.buffer.write(text.encode("utf-8", errors="surrogateescape"))
    sys.stdout.buffer.flush()


def resolve_walk_options(args: argparse.Namespace) -> WalkOptions:
    """Combine CLI flags with config-file defaults; flags win."""
    max_concurrency = args.max_concurrency
    if max_concurrency is None:
        max_concurrency = config.load_max_concurrency()
    cancel_on_error = False if args.no_cancel else config.load_cancel_on_error()
    return WalkOptions(max_concurrency=max_concurrency, cancel_on_error=cancel_on_error)


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments, walk the target directory, and print its tree.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Any error forwarded by the walk (``OSError``, a failed
    thread start, or a crashed unit) becomes a ``SystemExit`` with a message,
    so nothing is printed to stdout.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.path is not None and args.dir_path is not None:
        raise SystemExit("Cannot combine positional path with --dir.")
    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or args.dir_path or default_path)

    options = resolve_walk_options(args)
    logger.debug("walking %s with %s", path, options)
    try:
        root = walk(path, options)
    except Exception as exc:
        logger.debug("walk of %s failed", path, exc_info=True)
        raise SystemExit(f"dirsize: {exc}") from exc

    human_readable = args.human_readable or config.load_human_readable()
    text = render(root, human_readable=human_readable)
    if not args.no_color and sys.stdout.isatty():
        text = colorize_tree(text, args.style or config.load_style())
    write_output(text)


if __name__ == "__main__":
    main()
