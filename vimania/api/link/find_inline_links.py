"""Scan a line for inline Markdown links."""

from .LinkKind import LinkKind
from .LinkSpan import LinkSpan


def _closing_bracket(line: str, start: int) -> int:
    """Index of the "]" closing the "[" at start, or -1 if it is never closed.

    Balanced brackets inside the text are skipped.
    """
    depth = 0
    for index in range(start, len(line)):
        char = line[index]
        if char == "[":
            depth += 1
        elif char == "]":
            depth -= 1
            if depth == 0:
                return index
    return -1


def find_inline_links(line: str) -> list[LinkSpan]:
    """Return every [text](target) span in the line, left to right.

    The target ends at the first ')' after the opening parenthesis; nested
    parentheses are not supported. A '[' inside a found link never starts
    another link.
    """
    spans: list[LinkSpan] = []
    start = line.find("[")
    while start != -1:
        close = _closing_bracket(line, start)
        if close != -1 and line[close + 1 : close + 2] == "(":
            paren_end = line.find(")", close + 2)
            if paren_end != -1:
                spans.append(
                    LinkSpan(
                        start_col=start,
                        end_col=paren_end + 1,
                        raw_text=line[start : paren_end + 1],
                        kind=LinkKind.INLINE,
                    )
                )
                start = line.find("[", paren_end + 1)
                continue
        start = line.find("[", start + 1)
    return spans
