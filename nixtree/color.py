from __future__ import annotations

import os
import sys
from typing import TextIO

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import NixLexer


def use_color(stream: TextIO | None = None) -> bool:
    """Color only interactive output, and never when NO_COLOR is set."""
    stream = stream if stream is not None else sys.stdout
    if os.getenv("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def colorize_nix(code: str, stream: TextIO | None = None) -> str:
    """Highlight rebuilt Nix for a terminal; other outputs get the text unchanged."""
    if not code or not use_color(stream):
        return code
    return highlight(code, NixLexer(), TerminalFormatter()).rstrip("\n")


__all__ = ["colorize_nix", "use_color"]
