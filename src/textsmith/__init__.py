"""textsmith: CSS validation/auto-correction/minification and JSON formatting."""

__version__ = "0.1.0"
