"""Columns at which Markdown links start on a line."""

import re

from .find_inline_links import find_inline_links

_REFERENCE_LINK = re.compile(r"\[[^\]]*\]\[[^\]]*\]")


def find_link_starts(line: str) -> list[int]:
    """Return sorted start columns of inline and reference links."""
    inline_links = find_inline_links(line)
    starts = {span.start_col for span in inline_links}
    for match in _REFERENCE_LINK.finditer(line):
        if not any(span.contains(match.start()) for span in inline_links):
            starts.add(match.start())
    return sorted(starts)
