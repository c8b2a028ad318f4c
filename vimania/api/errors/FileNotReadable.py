"""Unreadable file error."""

from pathlib import Path

from .VimaniaError import VimaniaError


class FileNotReadable(VimaniaError):
    """Raised when a link's file does not exist or cannot be opened."""

    def __init__(self, path: Path | str, reason: str | None = None):
        self.path = Path(path)
        super().__init__(f"Cannot open {self.path}: {reason}" if reason else f"File does not exist: {self.path}")
