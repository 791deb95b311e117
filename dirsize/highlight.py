"""Terminal coloring for rendered size trees via Pygments."""

from __future__ import annotations

from pygments import highlight as pygments_highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import RegexLexer, bygroups
from pygments.styles import get_style_by_name
from pygments.token import Name, Number, Punctuation, Text, Whitespace
from pygments.util import ClassNotFound

from .config import DEFAULT_STYLE

_FORMATTERS: dict[str, Terminal256Formatter] = {}


class DirectoryTreeLexer(RegexLexer):
    """Lexer for ``|- name (size)`` lines produced by ``dirsize.tree_model.render``."""

    name = "Directory size tree"
    aliases = ["dirsize"]
    filenames: list[str] = []

    tokens = {
        "root": [
            (
                r"^( *)(\|-)( )(.*)( )(\()([^()\n]+)(\))(\n)",
                bygroups(Whitespace, Punctuation, Whitespace, Name, Whitespace, Punctuation, Number, Punctuation, Whitespace),
            ),
            (r"[^\n]*\n?", Text),
        ],
    }


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def _formatter_for_style(style: str) -> Terminal256Formatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = Terminal256Formatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def colorize_tree(text: str, style: str = DEFAULT_STYLE) -> str:
    """Return ``text`` with ANSI colors for branch markers, names and sizes."""
    if not text:
        return text
    formatter = _formatter_for_style(normalize_style(style))
    return pygments_highlight(text, DirectoryTreeLexer(stripnl=False, ensurenl=False), formatter)


__all__ = [
    "DirectoryTreeLexer",
    "normalize_style",
    "colorize_tree",
]
