"""CSS pipeline: strip comments, validate, correct once, re-validate, minify.

The policy is fixed: one validation, at most one auto-correction attempt, one
re-validation. Invalid input is never partially minified.
"""

from __future__ import annotations

import logging
from enum import Enum

from textsmith.css.comments import strip_comments
from textsmith.css.corrector import auto_correct
from textsmith.css.minifier import minify
from textsmith.css.validator import validate
from textsmith.errors import EmptyInputError, StructuralError
from textsmith.model.outcome import OutcomeKind, PipelineOutcome

__all__ = ["PipelineStage", "process_or_raise", "run_pipeline"]

logger = logging.getLogger(__name__)


class PipelineStage(Enum):
    IDLE = "idle"
    COMMENTS_STRIPPED = "comments_stripped"
    VALIDATING = "validating"
    VALID = "valid"
    CORRECTING = "correcting"
    REVALIDATING = "revalidating"
    MINIFIED = "minified"
    REJECTED = "rejected"


def _enter(stage: PipelineStage) -> None:
    logger.debug("CSS pipeline stage: %s", stage.value)


def process_or_raise(raw_text: str) -> PipelineOutcome:
    """Run the pipeline, raising on terminal failures.

    Raises:
        EmptyInputError: *raw_text* is empty or whitespace-only.
        StructuralError: errors remain after the auto-correction attempt. The
            exception carries the first validation pass's diagnostics.
    """
    _enter(PipelineStage.IDLE)
    if not raw_text.strip():
        raise EmptyInputError("CSS input is empty")

    stripped = strip_comments(raw_text)
    _enter(PipelineStage.COMMENTS_STRIPPED)

    _enter(PipelineStage.VALIDATING)
    first = validate(stripped)
    if first.is_valid:
        _enter(PipelineStage.VALID)
        _enter(PipelineStage.MINIFIED)
        return PipelineOutcome(
            kind=OutcomeKind.MINIFIED,
            output=minify(stripped),
            warnings=first.warnings,
        )

    logger.info("CSS failed validation: %s", "; ".join(first.errors))
    _enter(PipelineStage.CORRECTING)
    correction = auto_correct(stripped)

    _enter(PipelineStage.REVALIDATING)
    second = validate(correction.corrected_text)
    if not second.is_valid:
        _enter(PipelineStage.REJECTED)
        raise StructuralError([d for d in first.diagnostics if d.is_error])

    _enter(PipelineStage.MINIFIED)
    return PipelineOutcome(
        kind=OutcomeKind.CORRECTED_AND_MINIFIED,
        output=minify(correction.corrected_text),
        fix_log=correction.fixes,
        warnings=second.warnings,
    )


def run_pipeline(raw_text: str) -> PipelineOutcome:
    """Run the pipeline and report every result, failures included, as an outcome."""
    try:
        return process_or_raise(raw_text)
    except EmptyInputError:
        return PipelineOutcome(kind=OutcomeKind.EMPTY_INPUT)
    except StructuralError as exc:
        logger.info("CSS rejected after auto-correction")
        return PipelineOutcome(kind=OutcomeKind.REJECTED, errors=exc.errors)
