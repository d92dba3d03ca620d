from __future__ import annotations

from flask import Flask

from textsmith.config import TextsmithConfig


def create_app(config: TextsmithConfig | None = None, overrides: dict | None = None) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(overrides or {})
    app.extensions["textsmith_config"] = config or TextsmithConfig()

    # Register blueprints
    from textsmith.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
