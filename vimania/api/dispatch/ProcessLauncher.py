"""ProcessLauncher interface (UNO: single protocol)."""

from collections.abc import Sequence
from typing import Protocol


class ProcessLauncher(Protocol):
    def launch(self, command: str, args: Sequence[str]) -> bool:
        """Start command detached from the caller; True if it started."""
        ...
