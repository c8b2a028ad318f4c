"""Link next API command.

CLI: vimania link next <file> --row R --col C
"""

from pathlib import Path

from ..StageResult import StageResult
from ._move_to_link import _move_to_link
from .find_next_link import find_next_link


def cmd_next(file: Path, row: int, col: int) -> StageResult:
    """Find the start of the next link after the cursor."""
    return _move_to_link(file, row, col, find_next_link, "next")
