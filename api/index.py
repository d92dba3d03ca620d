"""Vercel serverless entry point for the textsmith API."""
import os
import sys

# Add src to path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from textsmith.web.app import create_app  # noqa: E402

app = create_app()
