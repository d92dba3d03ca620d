"""JSON parse/format helpers with line and column error positions."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any

from textsmith.errors import EmptyInputError, JsonSyntaxError

__all__ = [
    "JsonReport",
    "format_json",
    "format_text",
    "parse_json",
    "position_to_line_column",
    "validate_text",
]

EMPTY_INPUT_MESSAGE = "Input is empty. Paste JSON to continue."
FORMATTED_MESSAGE = "JSON formatted successfully."
VALID_MESSAGE = "JSON is valid."


def position_to_line_column(text: str, offset: int) -> tuple[int, int]:
    """Convert a character offset into a 1-based (line, column) pair."""
    before = text[:offset]
    lines = before.split("\n")
    return len(lines), len(lines[-1]) + 1


class _NonStandardConstant(ValueError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)


def _reject_constant(name: str) -> Any:
    raise _NonStandardConstant(name)


# A string literal or a bare NaN/Infinity token, whichever comes first.
_CONSTANT_TOKEN_RE = re.compile(r'"(?:[^"\\]|\\.)*"|-?Infinity|NaN')


def _constant_position(text: str) -> int:
    """Offset of the first NaN/Infinity token outside a string literal."""
    for match in _CONSTANT_TOKEN_RE.finditer(text):
        if not match.group().startswith('"'):
            return match.start()
    return 0


def _syntax_error(text: str, message: str, position: int) -> JsonSyntaxError:
    line, column = position_to_line_column(text, position)
    return JsonSyntaxError(message, line, column, position=position)


def parse_json(text: str) -> Any:
    """Decode *text*.

    A leading byte-order mark is ignored. ``NaN``, ``Infinity`` and
    ``-Infinity`` are rejected.

    Raises:
        EmptyInputError: *text* is empty or whitespace-only.
        JsonSyntaxError: *text* is not valid JSON.
    """
    body = text[1:] if text.startswith("\ufeff") else text
    if not body.strip():
        raise EmptyInputError(EMPTY_INPUT_MESSAGE)
    offset = len(text) - len(body)
    try:
        return json.loads(body, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise _syntax_error(text, exc.msg, offset + exc.pos) from exc
    except _NonStandardConstant as exc:
        position = offset + _constant_position(body)
        raise _syntax_error(text, f"Unexpected token {exc.name}", position) from exc


def format_json(value: Any, indent: int = 2) -> str:
    return json.dumps(value, indent=indent, ensure_ascii=False)


@dataclass(frozen=True)
class JsonReport:
    """Result of a format or validate action on JSON text."""

    ok: bool
    message: str
    output: str = ""
    line: int | None = None
    column: int | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"ok": self.ok, "message": self.message, "output": self.output}
        if self.line is not None:
            data["line"] = self.line
            data["column"] = self.column
        return data


def _failure(exc: EmptyInputError | JsonSyntaxError) -> JsonReport:
    if isinstance(exc, JsonSyntaxError):
        return JsonReport(ok=False, message=str(exc), line=exc.line, column=exc.column)
    return JsonReport(ok=False, message=str(exc))


def format_text(text: str, indent: int = 2) -> JsonReport:
    """Parse and pretty-print *text*; output is empty on failure."""
    try:
        value = parse_json(text)
    except (EmptyInputError, JsonSyntaxError) as exc:
        return _failure(exc)
    return JsonReport(ok=True, message=FORMATTED_MESSAGE, output=format_json(value, indent))


def validate_text(text: str) -> JsonReport:
    try:
        parse_json(text)
    except (EmptyInputError, JsonSyntaxError) as exc:
        return _failure(exc)
    return JsonReport(ok=True, message=VALID_MESSAGE)
