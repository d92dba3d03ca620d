"""Tests for TextsmithConfig."""

import pytest

from textsmith.config import MAX_JSON_INDENT, TextsmithConfig


class TestTextsmithConfig:
    def test_defaults(self):
        config = TextsmithConfig()
        assert config.json_indent == 2
        assert config.host == "127.0.0.1"
        assert config.port == 5000
        assert config.log_level == "WARNING"

    def test_negative_indent_rejected(self):
        with pytest.raises(ValueError, match="json_indent"):
            TextsmithConfig(json_indent=-1)

    def test_indent_above_max_rejected(self):
        with pytest.raises(ValueError, match="json_indent"):
            TextsmithConfig(json_indent=MAX_JSON_INDENT + 1)
        assert TextsmithConfig(json_indent=MAX_JSON_INDENT).json_indent == 16

    def test_unknown_log_level_rejected(self):
        with pytest.raises(ValueError, match="log level"):
            TextsmithConfig(log_level="LOUD")

    def test_is_frozen(self):
        config = TextsmithConfig()
        with pytest.raises(AttributeError):
            config.port = 1  # type: ignore[misc]
