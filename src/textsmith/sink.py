"""Output delivery behind a narrow text-sink interface.

The pipeline never writes anywhere itself; callers hand its output to a sink.
A failed delivery is reported, never raised, and does not touch pipeline state.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Protocol

import click

logger = logging.getLogger(__name__)


class TextSink(Protocol):
    """Somewhere finished text can be written."""

    name: str

    def write(self, text: str) -> None: ...


class StreamSink:
    """Write to a text stream (stdout when none is given)."""

    def __init__(self, stream: IO[str] | None = None, name: str = "stdout") -> None:
        self.stream = stream
        self.name = name

    def write(self, text: str) -> None:
        click.echo(text, file=self.stream)


class FileSink:
    """Write to a file, replacing its contents."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        self.name = str(self.path)

    def write(self, text: str) -> None:
        self.path.write_text(text + "\n", encoding="utf-8")


@dataclass(frozen=True)
class Delivery:
    ok: bool
    message: str


def deliver(text: str, sink: TextSink, label: str = "minified") -> Delivery:
    """Hand *text* to *sink* and describe how it went."""
    if not text.strip():
        return Delivery(ok=False, message=f"No {label} output available to copy.")
    try:
        sink.write(text)
    except OSError as exc:
        logger.warning("Writing to %s failed: %s", sink.name, exc)
        return Delivery(
            ok=False, message=f"Could not write to {sink.name}. Please copy manually."
        )
    heading = label[:1].upper() + label[1:]
    return Delivery(ok=True, message=f"{heading} output copied to {sink.name}.")
