"""Validation rules for stylesheet text.

Each rule is a function taking comment-stripped CSS and returning a list of
Diagnostic objects. The checks are regex heuristics over a flat view of the
text, not a CSS parser.
"""

from __future__ import annotations

import re

from textsmith.css.blocks import extract_blocks
from textsmith.css.braces import analyze
from textsmith.css.corrections import PROPERTY_CORRECTIONS
from textsmith.model.diagnostic import Diagnostic, Severity

UNMATCHED_BRACKET = "Unmatched bracket detected."
MISSING_SEMICOLON = "Missing semicolon before } detected."
INVALID_FORMAT = "Invalid CSS property format detected."


# ---------------------------------------------------------------------------
# Shared patterns
# ---------------------------------------------------------------------------

# A ``property: value`` span not yet terminated, followed by another
# ``property:`` or by the closing brace. Also used by the auto-corrector.
MISSING_SEMICOLON_RE = re.compile(
    r"""
    (?P<decl>[a-zA-Z-]+\s*:\s*[^;{}]+)   # declaration without terminator
    (?=
        \s+[a-zA-Z-]+\s*:                # next property
        |\s*\}                           # or end of block
    )
    """,
    re.VERBOSE,
)

# Identifier in property position. ASCII word boundaries, so a name may start
# right after a non-ASCII letter.
_PROPERTY_NAME_RE = re.compile(r"(?a:\b)(?P<name>[a-zA-Z-]+)\s*:")


# ---------------------------------------------------------------------------
# Structural rules (ERROR severity)
# ---------------------------------------------------------------------------


def check_brace_balance(css: str) -> list[Diagnostic]:
    """Every ``{`` must be closed and no ``}`` may appear without an opener."""
    info = analyze(css)
    if info.has_extra_closing_brace or info.missing_closing_count > 0:
        return [
            Diagnostic(
                rule="check_brace_balance",
                severity=Severity.ERROR,
                message=UNMATCHED_BRACKET,
            )
        ]
    return []


def check_missing_semicolon(css: str) -> list[Diagnostic]:
    """Declarations must be terminated before the next property or ``}``."""
    if MISSING_SEMICOLON_RE.search(css):
        return [
            Diagnostic(
                rule="check_missing_semicolon",
                severity=Severity.ERROR,
                message=MISSING_SEMICOLON,
            )
        ]
    return []


def _is_malformed(declaration: str) -> bool:
    if ":" not in declaration:
        return True
    prop, _, value = declaration.partition(":")
    return not prop.strip() or not value.strip()


def check_declaration_format(css: str) -> list[Diagnostic]:
    """Each declaration in a flat block must look like ``property: value``.

    Empty segments (``;;``) are dropped before the test.
    """
    for body in extract_blocks(css):
        declarations = [d.strip() for d in body.split(";")]
        if any(_is_malformed(d) for d in declarations if d):
            return [
                Diagnostic(
                    rule="check_declaration_format",
                    severity=Severity.ERROR,
                    message=INVALID_FORMAT,
                )
            ]
    return []


# ---------------------------------------------------------------------------
# Advisory rules (WARNING severity)
# ---------------------------------------------------------------------------


def check_property_typos(css: str) -> list[Diagnostic]:
    """Known misspelled property names. One warning per occurrence."""
    diagnostics: list[Diagnostic] = []
    for match in _PROPERTY_NAME_RE.finditer(css):
        name = match.group("name")
        correct = PROPERTY_CORRECTIONS.get(name)
        if correct:
            diagnostics.append(
                Diagnostic(
                    rule="check_property_typos",
                    severity=Severity.WARNING,
                    message=f'Property typo found: "{name}" -> "{correct}"',
                )
            )
    return diagnostics


# ---------------------------------------------------------------------------
# Rule registry
# ---------------------------------------------------------------------------

# Order determines the order of reported errors and warnings.
ALL_RULES = [
    check_brace_balance,
    check_missing_semicolon,
    check_property_typos,
    check_declaration_format,
]
