"""JSON formatting and validation."""

from textsmith.jsonfmt.formatter import (
    JsonReport,
    format_json,
    format_text,
    parse_json,
    position_to_line_column,
    validate_text,
)

__all__ = [
    "JsonReport",
    "format_json",
    "format_text",
    "parse_json",
    "position_to_line_column",
    "validate_text",
]
