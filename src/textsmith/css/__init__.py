"""CSS validation, auto-correction and minification."""

from textsmith.css.blocks import extract_blocks
from textsmith.css.braces import BraceBalanceInfo, analyze
from textsmith.css.comments import strip_comments
from textsmith.css.corrections import PROPERTY_CORRECTIONS
from textsmith.css.corrector import auto_correct
from textsmith.css.minifier import minify
from textsmith.css.pipeline import PipelineStage, process_or_raise, run_pipeline
from textsmith.css.validator import validate, validate_or_raise

__all__ = [
    "PROPERTY_CORRECTIONS",
    "BraceBalanceInfo",
    "analyze",
    "extract_blocks",
    "strip_comments",
    "validate",
    "validate_or_raise",
    "auto_correct",
    "minify",
    "PipelineStage",
    "process_or_raise",
    "run_pipeline",
]
