from __future__ import annotations

import os
import sys

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import NixLexer, PythonLexer


def _use_color(text: str) -> bool:
    return bool(text) and os.getenv("NO_COLOR") != "1" and sys.stdout.isatty()


def colorize_nix(code: str) -> str:
    """Highlight Nix snippets for terminal output."""
    if not _use_color(code):
        return code
    return highlight(code, NixLexer(), TerminalFormatter())


def colorize_python(code: str) -> str:
    """Highlight CST dumps, which are rendered with Python call syntax."""
    if not _use_color(code):
        return code
    return highlight(code, PythonLexer(), TerminalFormatter())


__all__ = ["colorize_nix", "colorize_python"]
