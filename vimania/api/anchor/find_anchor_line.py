"""Locate the line an anchor points at."""

from collections.abc import Sequence

from .ANCHOR_PATTERNS import ATTR_LIST_PATTERN, HEADING_PATTERN
from .title_to_anchor import title_to_anchor


def find_anchor_line(target: str, lines: Sequence[str]) -> int | None:
    """Find the 0-indexed line of a heading or custom ID matching target.

    Headings are compared by slug; attribute-list IDs are compared literally.
    The first match in document order wins.
    """
    if target.startswith("#"):
        target = target[1:]
    normalized = title_to_anchor(target)

    for index, line in enumerate(lines):
        heading = HEADING_PATTERN.match(line)
        if heading and title_to_anchor(heading.group(1)) == normalized:
            return index

        custom_id = ATTR_LIST_PATTERN.search(line)
        if custom_id and custom_id.group(1) == target:
            return index

    return None
