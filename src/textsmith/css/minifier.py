"""Whitespace and punctuation compaction for validated CSS."""

from __future__ import annotations

import re

__all__ = ["minify"]

_WHITESPACE_RE = re.compile(r"\s+")
_PUNCTUATION_RE = re.compile(r"\s*([{}:;,>+~])\s*")
_IMPORTANT_RE = re.compile(r"\s*!important")


def minify(css: str) -> str:
    """Compact *css*, which must already have passed validation.

    Comments are not handled here; strip them first.
    """
    css = _WHITESPACE_RE.sub(" ", css)
    css = _PUNCTUATION_RE.sub(r"\1", css)
    css = css.replace(";}", "}")
    css = _IMPORTANT_RE.sub("!important", css)
    return css.strip()
