"""Find the Markdown link construct under a cursor column."""

from .find_inline_links import find_inline_links
from .LinkKind import LinkKind
from .LinkSpan import LinkSpan


def locate_link_span(line: str, cursor_col: int) -> LinkSpan | None:
    """Return the link span enclosing cursor_col, or None.

    Inline links win. Otherwise the last '[' at or before the cursor is taken
    as the start of a reference link ``[text][ref]`` and the span runs to the
    end of the line; the caller parses it further. A cursor sitting after a
    complete inline link (e.g. between two links) yields None.
    """
    inline_links = find_inline_links(line)
    for span in inline_links:
        if span.contains(cursor_col):
            return span

    start = line.rfind("[", 0, cursor_col + 1)
    if start == -1:
        return None

    if any(span.contains(start) for span in inline_links):
        return None

    # Cursor on the [ref] half of [text][ref]
    if start > 0 and line[start - 1] == "]":
        opener = line.rfind("[", 0, start - 1)
        if opener != -1:
            start = opener

    return LinkSpan(start_col=start, end_col=len(line), raw_text=line[start:], kind=LinkKind.REFERENCE)
