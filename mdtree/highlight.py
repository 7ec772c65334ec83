"""Pygments highlighting for files opened from the tree."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .config import DEFAULT_STYLE


def decode_text(data: bytes) -> str:
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    return data.decode("utf-8", errors="replace")


def normalize_style(style: str) -> str:
    """Return ``style`` when Pygments knows it, otherwise the default style."""
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


@lru_cache(maxsize=16)
def _formatter_for_style(style: str) -> TerminalFormatter:
    return TerminalFormatter(style=style)


def highlight_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    """Highlight ``source`` using a lexer picked from ``path``'s file name."""
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()
    return highlight(source, lexer, _formatter_for_style(normalize_style(style)))


def render_open_file(data: bytes, path: Path, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Return printable contents of ``data`` read from ``path`` for the open-file action."""
    source = decode_text(data)
    if no_color:
        return source if source.endswith("\n") or not source else source + "\n"
    return highlight_source(source, path, style)


__all__ = ["decode_text", "highlight_source", "normalize_style", "render_open_file"]
