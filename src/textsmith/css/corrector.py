"""Safe, rule-based auto-correction of stylesheet text.

Three passes run once each, in order: semicolon insertion, property spelling
correction, closing unclosed blocks at end of input. Anything else is left for
the validator to reject.
"""

from __future__ import annotations

import logging
import re

from textsmith.css.braces import analyze
from textsmith.css.corrections import PROPERTY_CORRECTIONS
from textsmith.css.rules import MISSING_SEMICOLON_RE
from textsmith.model.results import CorrectionResult

__all__ = ["auto_correct"]

logger = logging.getLogger(__name__)

SEMICOLON_FIX = "Auto-corrected missing semicolon before }"
BRACE_FIX = "Auto-closed unclosed block at end of file"

_SPELLING_RE = re.compile(
    r"(?a:\b)(?P<name>"
    + "|".join(map(re.escape, PROPERTY_CORRECTIONS))
    + r")(?a:\b)(?=\s*:)"
)


def _insert_semicolons(css: str, fixes: list[str]) -> str:
    fixed = MISSING_SEMICOLON_RE.sub(r"\g<decl>;", css)
    if fixed != css:
        fixes.append(SEMICOLON_FIX)
    return fixed


def _correct_spelling(css: str, fixes: list[str]) -> str:
    def replace(match: re.Match[str]) -> str:
        bad = match.group("name")
        good = PROPERTY_CORRECTIONS[bad]
        fixes.append(f"Corrected spelling: {bad} -> {good}")
        return good

    return _SPELLING_RE.sub(replace, css)


def _close_blocks(css: str, fixes: list[str]) -> str:
    info = analyze(css)
    # A stray "}" makes it impossible to tell which block is really open.
    if info.has_extra_closing_brace or info.missing_closing_count == 0:
        return css
    fixes.append(BRACE_FIX)
    return css + "}" * info.missing_closing_count


def auto_correct(css: str) -> CorrectionResult:
    """Apply each safe fix once and record what was changed."""
    fixes: list[str] = []
    corrected = _insert_semicolons(css, fixes)
    corrected = _correct_spelling(corrected, fixes)
    corrected = _close_blocks(corrected, fixes)
    for fix in fixes:
        logger.info("Auto-correction: %s", fix)
    return CorrectionResult(corrected_text=corrected, fixes=fixes)
