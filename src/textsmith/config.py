from __future__ import annotations

import logging
from dataclasses import dataclass

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
MAX_JSON_INDENT = 16


@dataclass(frozen=True)
class TextsmithConfig:
    json_indent: int = 2
    host: str = "127.0.0.1"
    port: int = 5000
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if not 0 <= self.json_indent <= MAX_JSON_INDENT:
            raise ValueError(
                f"json_indent must be 0..{MAX_JSON_INDENT}, got {self.json_indent}"
            )
        if self.log_level.upper() not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    def configure_logging(self) -> None:
        """Set up the root logger for command-line and server use."""
        logging.basicConfig(
            level=self.log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
