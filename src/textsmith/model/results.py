"""Result models for validation and auto-correction."""

from __future__ import annotations

from dataclasses import dataclass, field

from textsmith.model.diagnostic import Diagnostic


@dataclass(frozen=True)
class ValidationResult:
    """Verdict of one validation pass, diagnostics in rule order."""

    diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def is_valid(self) -> bool:
        """True iff no ERROR diagnostic was produced. Warnings never count."""
        return not any(d.is_error for d in self.diagnostics)

    @property
    def errors(self) -> list[str]:
        return [d.message for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> list[str]:
        return [d.message for d in self.diagnostics if d.is_warning]


@dataclass(frozen=True)
class CorrectionResult:
    """Text after one auto-correction attempt plus the log of applied fixes."""

    corrected_text: str
    fixes: list[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        return bool(self.fixes)
