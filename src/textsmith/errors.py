"""Error types raised by the CSS pipeline and the JSON formatter."""

from __future__ import annotations

from textsmith.model.diagnostic import Diagnostic


class TextsmithError(Exception):
    """Base class for all textsmith errors."""


class EmptyInputError(TextsmithError):
    """Raised when the input is empty or whitespace-only."""


class StructuralError(TextsmithError):
    """Raised when ERROR diagnostics survive the single auto-correction attempt."""

    def __init__(self, diagnostics: list[Diagnostic]) -> None:
        self.diagnostics = diagnostics
        messages = [d.message for d in diagnostics if d.is_error]
        super().__init__(
            f"Invalid CSS structure: {len(messages)} error(s): " + "; ".join(messages)
        )

    @property
    def errors(self) -> list[str]:
        return [d.message for d in self.diagnostics if d.is_error]


class JsonSyntaxError(TextsmithError):
    """Raised when JSON text cannot be decoded.

    ``line`` and ``column`` are 1-based and refer to the text handed to the parser.
    """

    def __init__(
        self, raw_message: str, line: int, column: int, position: int | None = None
    ) -> None:
        self.raw_message = raw_message
        self.line = line
        self.column = column
        self.position = position
        super().__init__(f"Invalid JSON at line {line}, column {column}: {raw_message}")
