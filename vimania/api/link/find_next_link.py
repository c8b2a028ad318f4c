"""Locate the next link after the cursor."""

from collections.abc import Sequence

from .CursorPosition import CursorPosition
from .find_link_starts import find_link_starts


def find_next_link(lines: Sequence[str], cursor: CursorPosition) -> CursorPosition | None:
    """Return the start of the first link after the cursor, searching forward.

    On the cursor row only links starting strictly after the cursor count.
    """
    for row in range(cursor.row, len(lines)):
        for col in find_link_starts(lines[row]):
            if row > cursor.row or col > cursor.col:
                return CursorPosition(row=row, col=col)
    return None
