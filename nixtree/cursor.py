"""Character cursor with line/column tracking over the Nix source text."""

from __future__ import annotations

from typing import NamedTuple

from nixtree.exceptions import NixSyntaxError

CONTEXT_RADIUS = 30


class CursorState(NamedTuple):
    """Position triple saved before a speculative scan and restored on rollback."""

    position: int
    line: int
    column: int


class Cursor:
    def __init__(self, text: str):
        self.text = text
        self.position = 0
        self.line = 1
        self.column = 1

    @property
    def current(self) -> str | None:
        """Character under the cursor, or None at end of input."""
        if self.position < len(self.text):
            return self.text[self.position]
        return None

    def peek(self, offset: int = 1) -> str | None:
        index = self.position + offset
        if index < len(self.text):
            return self.text[index]
        return None

    def at_end(self) -> bool:
        return self.position >= len(self.text)

    def advance(self, count: int = 1) -> None:
        for _ in range(count):
            char = self.current
            if char is None:
                return
            if char == "\n":
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.position += 1

    def peek_string(self, expected: str) -> bool:
        """Check whether *expected* occurs at the cursor without consuming it."""
        return self.text.startswith(expected, self.position)

    def snapshot(self) -> CursorState:
        return CursorState(self.position, self.line, self.column)

    def restore(self, state: CursorState) -> None:
        self.position, self.line, self.column = state

    def context(self, position: int | None = None, radius: int = CONTEXT_RADIUS) -> str:
        """Render the text around *position* with a caret under it.

        Newlines inside the window are shown as the two characters ``\\n`` so the
        snippet stays on one line; the caret accounts for that expansion.
        """
        if position is None:
            position = self.position
        start = max(0, position - radius)
        end = min(len(self.text), position + radius)
        before = self.text[start:position].replace("\n", "\\n")
        window = self.text[start:end].replace("\n", "\\n")
        return f"{window}\n{' ' * len(before)}^"

    def error(self, message: str, state: CursorState | None = None) -> NixSyntaxError:
        """Build a positioned syntax error at *state*, or at the cursor."""
        if state is None:
            state = self.snapshot()
        return NixSyntaxError(
            message,
            line=state.line,
            column=state.column,
            context=self.context(state.position),
        )


__all__ = ["Cursor", "CursorState"]
