"""Locate the previous link before the cursor."""

from collections.abc import Sequence

from .CursorPosition import CursorPosition
from .find_link_starts import find_link_starts


def find_prev_link(lines: Sequence[str], cursor: CursorPosition) -> CursorPosition | None:
    """Return the start of the last link before the cursor, searching backward."""
    last_row = min(cursor.row, len(lines) - 1)
    for row in range(last_row, -1, -1):
        for col in reversed(find_link_starts(lines[row])):
            if row < cursor.row or col < cursor.col:
                return CursorPosition(row=row, col=col)
    return None
