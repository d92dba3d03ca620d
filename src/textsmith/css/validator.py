"""Stylesheet validator: runs all validation rules and reports diagnostics."""

from __future__ import annotations

from typing import Callable

from textsmith.css.rules import ALL_RULES
from textsmith.errors import StructuralError
from textsmith.model.diagnostic import Diagnostic
from textsmith.model.results import ValidationResult

RuleFunc = Callable[[str], list[Diagnostic]]


def validate(css: str, extra_rules: list[RuleFunc] | None = None) -> ValidationResult:
    """Run every rule against *css*; no rule short-circuits another."""
    rules: list[RuleFunc] = list(ALL_RULES)
    if extra_rules:
        rules.extend(extra_rules)
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        diagnostics.extend(rule(css))
    return ValidationResult(diagnostics=tuple(diagnostics))


def validate_or_raise(
    css: str, extra_rules: list[RuleFunc] | None = None
) -> list[Diagnostic]:
    """Run validation; raises :class:`StructuralError` if any ERROR diagnostics exist.

    Returns the non-error diagnostics (warnings) when no errors are found.
    """
    result = validate(css, extra_rules=extra_rules)
    errors = [d for d in result.diagnostics if d.is_error]
    if errors:
        raise StructuralError(errors)
    return list(result.diagnostics)
