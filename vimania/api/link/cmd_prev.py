"""Link prev API command.

CLI: vimania link prev <file> --row R --col C
"""

from pathlib import Path

from ..StageResult import StageResult
from ._move_to_link import _move_to_link
from .find_prev_link import find_prev_link


def cmd_prev(file: Path, row: int, col: int) -> StageResult:
    """Find the start of the previous link before the cursor."""
    return _move_to_link(file, row, col, find_prev_link, "previous")
