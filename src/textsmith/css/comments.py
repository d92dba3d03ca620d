"""Comment stripping, run before any validation or correction step."""

from __future__ import annotations

import re

__all__ = ["strip_comments"]

# Non-nesting, non-greedy; DOTALL so a comment may span lines.
_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)


def strip_comments(css: str) -> str:
    """Remove every ``/* ... */`` span. An unterminated ``/*`` is left alone."""
    return _COMMENT_RE.sub("", css)
