from __future__ import annotations


class ParseError(Exception):
    """Failure to read, parse or write a Nix value.

    Carries a 1-based position and a context snippet pointing at the failure.
    Position fields are zero when the failure is not tied to source text.
    """

    def __init__(self, message: str, line: int = 0, column: int = 0, context: str = ""):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.context = context

    def __str__(self) -> str:
        text = f"Parse error at line {self.line}, column {self.column}: {self.message}"
        if self.context:
            text += f"\n{self.context}"
        return text


class NixSyntaxError(ParseError, SyntaxError):
    pass


class NixIOError(ParseError):
    """Raised when the source file cannot be read or the output cannot be written."""

    pass


__all__ = ["NixIOError", "NixSyntaxError", "ParseError"]
