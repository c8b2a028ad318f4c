"""Split a file link into path, line and anchor."""

import re

from .ParsedFileTarget import ParsedFileTarget

_LINE_SUFFIX = re.compile(r"^(.*):(\d+)$")


def parse_file_target(target: str) -> ParsedFileTarget:
    """Decompose ``path[#anchor][:line]``.

    A trailing ``:<digits>`` is the line when it is positive; otherwise it
    stays in the path. A trailing ``#anchor`` is stripped next.

    >>> parse_file_target("notes.md:42#intro")
    ParsedFileTarget(path='notes.md', line=42, anchor='intro')
    """
    path = target.strip()
    line = None
    anchor = None

    match = _LINE_SUFFIX.match(path)
    if match and int(match.group(2)) > 0:
        path, line = match.group(1), int(match.group(2))

    if "#" in path:
        head, _, tail = path.rpartition("#")
        if head and tail:
            path, anchor = head, tail

    if line is None:
        # notes.md:42#intro
        match = _LINE_SUFFIX.match(path)
        if match and int(match.group(2)) > 0:
            path, line = match.group(1), int(match.group(2))

    return ParsedFileTarget(path=path, line=line, anchor=anchor)
