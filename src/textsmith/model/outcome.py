"""Outcome model: the structured result of one CSS pipeline run."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

MINIFIED_STATUS = "CSS validated and minified"
CORRECTION_FALLBACK_STATUS = "Auto-correction applied"
EMPTY_INPUT_STATUS = "Please enter CSS input first."
REJECTED_STATUS = "Invalid CSS structure detected"


class OutcomeKind(Enum):
    """Terminal states of the CSS pipeline."""

    EMPTY_INPUT = "empty_input"
    MINIFIED = "minified"
    CORRECTED_AND_MINIFIED = "corrected_and_minified"
    REJECTED = "rejected"


class StatusLevel(Enum):
    """How a caller should present the status message."""

    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class PipelineOutcome:
    """Result of :func:`textsmith.css.pipeline.run_pipeline`.

    ``output`` is empty unless the kind is MINIFIED or CORRECTED_AND_MINIFIED.
    ``errors`` holds the first validation pass's errors for a REJECTED run.
    """

    kind: OutcomeKind
    output: str = ""
    fix_log: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.kind in (OutcomeKind.MINIFIED, OutcomeKind.CORRECTED_AND_MINIFIED)

    @property
    def level(self) -> StatusLevel:
        if self.kind is OutcomeKind.MINIFIED:
            return StatusLevel.SUCCESS
        if self.kind is OutcomeKind.CORRECTED_AND_MINIFIED:
            return StatusLevel.WARNING
        return StatusLevel.ERROR

    @property
    def status(self) -> str:
        """Advisory status text for display."""
        if self.kind is OutcomeKind.EMPTY_INPUT:
            return EMPTY_INPUT_STATUS
        if self.kind is OutcomeKind.REJECTED:
            return REJECTED_STATUS
        if self.kind is OutcomeKind.MINIFIED:
            return MINIFIED_STATUS
        fixes = self.fix_log or [CORRECTION_FALLBACK_STATUS]
        return " | ".join([*fixes, MINIFIED_STATUS])

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "output": self.output,
            "status": self.status,
            "level": self.level.value,
            "fix_log": list(self.fix_log),
            "warnings": list(self.warnings),
            "errors": list(self.errors),
        }
