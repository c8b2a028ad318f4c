"""CursorPosition model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CursorPosition:
    """0-indexed cursor location; col is a character offset into the row."""

    row: int
    col: int

    def __post_init__(self):
        if self.row < 0 or self.col < 0:
            raise ValueError(f"Cursor position must be non-negative, got ({self.row}, {self.col})")
