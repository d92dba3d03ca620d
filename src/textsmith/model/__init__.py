"""textsmith model layer -- public type re-exports."""

from textsmith.model.diagnostic import Diagnostic, Severity
from textsmith.model.outcome import OutcomeKind, PipelineOutcome, StatusLevel
from textsmith.model.results import CorrectionResult, ValidationResult

__all__ = [
    # diagnostic
    "Severity",
    "Diagnostic",
    # results
    "ValidationResult",
    "CorrectionResult",
    # outcome
    "OutcomeKind",
    "StatusLevel",
    "PipelineOutcome",
]
