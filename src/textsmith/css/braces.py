"""Brace balance analysis over raw stylesheet text."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["BraceBalanceInfo", "analyze"]


@dataclass(frozen=True)
class BraceBalanceInfo:
    """Unmatched-brace status of a piece of text.

    ``missing_closing_count`` is the number of ``{`` left open at the end of the
    scan and is never negative; a surplus ``}`` only sets
    ``has_extra_closing_brace``.
    """

    missing_closing_count: int = 0
    has_extra_closing_brace: bool = False

    @property
    def is_balanced(self) -> bool:
        return self.missing_closing_count == 0 and not self.has_extra_closing_brace


def analyze(text: str) -> BraceBalanceInfo:
    """Scan *text* left to right and report unmatched braces.

    Depth is clamped at zero: a ``}`` with nothing open is recorded as extra
    and does not consume a later ``{``.
    """
    depth = 0
    extra = False
    for char in text:
        if char == "{":
            depth += 1
        elif char == "}":
            if depth > 0:
                depth -= 1
            else:
                extra = True
    return BraceBalanceInfo(missing_closing_count=depth, has_extra_closing_brace=extra)
