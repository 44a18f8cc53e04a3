"""Session transcript: everything printed and read, dumpable to a file."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class TranscriptError(Exception):
    """Error writing the transcript to disk."""


class Transcript:
    """Accumulates session lines in the order they happened."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def __len__(self) -> int:
        return len(self._lines)

    def record(self, line: str) -> None:
        self._lines.append(f"{line}\n")

    @property
    def text(self) -> str:
        return "".join(self._lines)

    def save(self, path: Path) -> None:
        """Write the transcript so far to ``path``, overwriting it."""
        try:
            with open(path, "w", encoding="utf-8", newline="") as f:
                f.write(self.text)
        except OSError as e:
            raise TranscriptError(f"Cannot write {path}: {e}") from e
        logger.info("Saved transcript (%d lines) to %s", len(self._lines), path)
