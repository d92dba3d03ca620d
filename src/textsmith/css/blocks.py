"""Flat declaration-block extraction."""

from __future__ import annotations

import re

__all__ = ["extract_blocks"]

# Innermost brace spans only; nested rules are never matched as a whole.
_BLOCK_RE = re.compile(r"\{(?P<body>[^{}]*)\}")


def extract_blocks(text: str) -> list[str]:
    """Return the interior of every ``{...}`` span that contains no other brace."""
    return [match.group("body") for match in _BLOCK_RE.finditer(text)]
