"""Tests for the CSS validate/correct/minify pipeline."""

import pytest

from textsmith.css.comments import strip_comments
from textsmith.css.corrector import BRACE_FIX, SEMICOLON_FIX
from textsmith.css.minifier import minify
from textsmith.css.pipeline import process_or_raise, run_pipeline
from textsmith.css.rules import INVALID_FORMAT, MISSING_SEMICOLON, UNMATCHED_BRACKET
from textsmith.errors import EmptyInputError, StructuralError
from textsmith.model.outcome import (
    EMPTY_INPUT_STATUS,
    MINIFIED_STATUS,
    REJECTED_STATUS,
    OutcomeKind,
    StatusLevel,
)


# ---------------------------------------------------------------------------
# Empty input
# ---------------------------------------------------------------------------


class TestEmptyInput:
    @pytest.mark.parametrize("text", ["", "   ", "\n\t  \n"])
    def test_empty_input(self, text):
        outcome = run_pipeline(text)
        assert outcome.kind is OutcomeKind.EMPTY_INPUT
        assert outcome.output == ""
        assert outcome.status == EMPTY_INPUT_STATUS
        assert outcome.level is StatusLevel.ERROR
        assert not outcome.succeeded

    def test_comment_only_input_is_not_empty(self):
        outcome = run_pipeline("/* nothing here */")
        assert outcome.kind is OutcomeKind.MINIFIED
        assert outcome.output == ""


# ---------------------------------------------------------------------------
# Valid input
# ---------------------------------------------------------------------------


class TestValidInput:
    def test_minified(self):
        outcome = run_pipeline("a {\n  color: red;\n}\n")
        assert outcome.kind is OutcomeKind.MINIFIED
        assert outcome.output == "a{color:red}"
        assert outcome.status == MINIFIED_STATUS
        assert outcome.level is StatusLevel.SUCCESS
        assert outcome.fix_log == []

    @pytest.mark.parametrize(
        "css",
        [
            "/* header */\nbody { margin: 0; padding: 0; }",
            "a:hover { color: red; }",
            "h1, h2 { font-weight: bold; }\n/* end */",
            "a { background: url(http://x.test/a.png); }",
        ],
    )
    def test_output_equals_minified_stripped_input(self, css):
        assert run_pipeline(css).output == minify(strip_comments(css))

    def test_comment_braces_ignored(self):
        outcome = run_pipeline("a{color:red; /* } */}")
        assert outcome.kind is OutcomeKind.MINIFIED
        assert outcome.output == "a{color:red}"

    def test_double_semicolon(self):
        outcome = run_pipeline("a{color:red;;}")
        assert outcome.kind is OutcomeKind.MINIFIED
        assert outcome.output == "a{color:red;}"

    def test_typo_warned_but_not_corrected_when_valid(self):
        outcome = run_pipeline("a{colr:red;}")
        assert outcome.kind is OutcomeKind.MINIFIED
        assert outcome.output == "a{colr:red}"
        assert outcome.warnings == ['Property typo found: "colr" -> "color"']


# ---------------------------------------------------------------------------
# Auto-corrected input
# ---------------------------------------------------------------------------


class TestCorrectedInput:
    def test_missing_semicolon_and_typo(self):
        outcome = run_pipeline("a{colr:red}")
        assert outcome.kind is OutcomeKind.CORRECTED_AND_MINIFIED
        assert outcome.output == "a{color:red}"
        assert outcome.fix_log == [SEMICOLON_FIX, "Corrected spelling: colr -> color"]
        assert outcome.warnings == []
        assert outcome.level is StatusLevel.WARNING
        assert outcome.status == (
            "Auto-corrected missing semicolon before } | "
            "Corrected spelling: colr -> color | "
            "CSS validated and minified"
        )

    def test_unclosed_block(self):
        outcome = run_pipeline("a{color:red b{color:blue}")
        assert outcome.kind is OutcomeKind.CORRECTED_AND_MINIFIED
        assert outcome.output == "a{color:red b{color:blue}}"
        assert BRACE_FIX in outcome.fix_log

    def test_multiline_input(self):
        css = "/* theme */\n.btn {\n  colr: white;\n  backgroung: navy\n}\n"
        outcome = run_pipeline(css)
        assert outcome.kind is OutcomeKind.CORRECTED_AND_MINIFIED
        assert outcome.output == ".btn{color:white;background:navy}"


# ---------------------------------------------------------------------------
# Rejected input
# ---------------------------------------------------------------------------


class TestRejectedInput:
    def test_extra_closing_brace(self):
        outcome = run_pipeline("a{color:red}}")
        assert outcome.kind is OutcomeKind.REJECTED
        assert outcome.output == ""
        assert outcome.status == REJECTED_STATUS
        assert outcome.errors == [UNMATCHED_BRACKET, MISSING_SEMICOLON]

    def test_run_on_declarations_across_lines(self):
        # The greedy declaration match spans both lines, so only one ";" is
        # inserted and the re-validation still fails.
        outcome = run_pipeline("a {\n  color: red\n  margin: 0\n}")
        assert outcome.kind is OutcomeKind.REJECTED
        assert outcome.errors == [MISSING_SEMICOLON]

    def test_unfixable_format(self):
        outcome = run_pipeline("a{color}")
        assert outcome.kind is OutcomeKind.REJECTED
        assert outcome.errors == [INVALID_FORMAT]


class TestProcessOrRaise:
    def test_returns_outcome(self):
        assert process_or_raise("a{color:red;}").output == "a{color:red}"

    def test_empty_raises(self):
        with pytest.raises(EmptyInputError):
            process_or_raise("  ")

    def test_structural_error_carries_first_pass_errors(self):
        with pytest.raises(StructuralError) as exc_info:
            process_or_raise("a{color:red}}")
        assert exc_info.value.errors == [UNMATCHED_BRACKET, MISSING_SEMICOLON]
