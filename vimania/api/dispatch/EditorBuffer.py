"""EditorBuffer interface (UNO: single protocol)."""

from collections.abc import Sequence
from typing import Protocol


class EditorBuffer(Protocol):
    """The host editor as seen by the dispatcher.

    Rows and columns are 0-indexed.
    """

    def get_lines(self) -> Sequence[str]: ...

    def get_cursor(self) -> tuple[int, int]: ...

    def set_cursor(self, row: int, col: int) -> None: ...

    def open_in_new_view(self, path: str) -> None:
        """Open path and make it the current buffer."""
        ...

    def insert_text(self, text: str) -> None:
        """Insert text at the cursor."""
        ...
