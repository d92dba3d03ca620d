from __future__ import annotations

import logging

from flask import Blueprint, current_app, jsonify, request

from textsmith import __version__
from textsmith.config import MAX_JSON_INDENT
from textsmith.css import run_pipeline, strip_comments, validate
from textsmith.jsonfmt import format_text, validate_text

logger = logging.getLogger(__name__)

api_bp = Blueprint("api", __name__)


@api_bp.after_request
def add_cors_headers(response):
    """Allow cross-origin requests to the API."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
    return response


def _text_field(name: str) -> str | None:
    """Return a string field from the JSON body, or None if missing/mistyped."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return None
    value = data.get(name)
    return value if isinstance(value, str) else None


@api_bp.route("/health")
def health():
    return jsonify({"status": "ok", "version": __version__})


@api_bp.route("/css/minify", methods=["POST"])
def minify_css():
    """Validate, auto-correct if needed, and minify CSS."""
    css = _text_field("css")
    if css is None:
        return jsonify({"error": "css (string) required"}), 400
    outcome = run_pipeline(css)
    logger.debug("minify request finished: %s", outcome.kind.value)
    return jsonify(outcome.to_dict())


@api_bp.route("/css/validate", methods=["POST"])
def validate_css():
    """Validate CSS without correcting or minifying it."""
    css = _text_field("css")
    if css is None:
        return jsonify({"error": "css (string) required"}), 400
    result = validate(strip_comments(css))
    return jsonify({
        "is_valid": result.is_valid,
        "errors": result.errors,
        "warnings": result.warnings,
    })


@api_bp.route("/json/format", methods=["POST"])
def format_json():
    """Pretty-print JSON text."""
    text = _text_field("text")
    if text is None:
        return jsonify({"error": "text (string) required"}), 400
    data = request.get_json(silent=True)
    indent = data.get("indent", current_app.extensions["textsmith_config"].json_indent)
    valid_indent = isinstance(indent, int) and not isinstance(indent, bool)
    if not valid_indent or not 0 <= indent <= MAX_JSON_INDENT:
        return jsonify({"error": f"indent must be an integer from 0 to {MAX_JSON_INDENT}"}), 400
    report = format_text(text, indent=indent)
    return jsonify(report.to_dict()), 200 if report.ok else 422


@api_bp.route("/json/validate", methods=["POST"])
def validate_json():
    """Check that JSON text parses."""
    text = _text_field("text")
    if text is None:
        return jsonify({"error": "text (string) required"}), 400
    report = validate_text(text)
    return jsonify(report.to_dict()), 200 if report.ok else 422
