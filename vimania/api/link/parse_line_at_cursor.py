"""Resolve the link target under the cursor."""

from collections.abc import Sequence

from ...utils.logger import get_logger
from ..url.find_all_url_occurrences import find_all_url_occurrences
from .CursorPosition import CursorPosition
from .find_inline_links import find_inline_links
from .LINK_PATTERNS import (
    INLINE_LINK_PATTERN,
    INVALID_PATH_CHARS,
    REFERENCE_DEFINITION_PATTERN,
    REFERENCE_LINK_PATTERN,
)
from .LinkKind import LinkKind
from .LinkSpan import LinkSpan
from .locate_link_span import locate_link_span
from .resolve_reference import resolve_reference

logger = get_logger("link")

# Strategy 1 found an inline link with nothing to open
_BLANK = ""


def _markdown_link_target(span: LinkSpan, cursor_col: int, lines: Sequence[str]) -> str | None:
    if span.kind is LinkKind.INLINE:
        match = INLINE_LINK_PATTERN.match(span.raw_text)
        return match.group(2).strip() if match else _BLANK

    match = REFERENCE_LINK_PATTERN.match(span.raw_text)
    if not match or cursor_col >= span.start_col + match.end():
        return None
    text, ref = match.group(1), match.group(2)
    return resolve_reference(ref or text, lines)


def _standalone_url(line: str, cursor_col: int, inline_links: list[LinkSpan]) -> str | None:
    for occurrence in find_all_url_occurrences(line):
        if not occurrence.contains(cursor_col):
            continue
        # A match may run past the closing ")" into trailing punctuation
        embedded = any(span.start_col < occurrence.start < span.end_col for span in inline_links)
        if not embedded:
            return occurrence.url
    return None


def _file_token(line: str, cursor_col: int, inline_links: list[LinkSpan]) -> str | None:
    if cursor_col >= len(line) or line[cursor_col].isspace():
        return None

    start = cursor_col
    while start > 0 and not line[start - 1].isspace():
        start -= 1
    end = cursor_col
    while end < len(line) and not line[end].isspace():
        end += 1

    token = line[start:end]
    if INVALID_PATH_CHARS.search(token):
        return None
    if any(span.start_col < end and start < span.end_col for span in inline_links):
        return None
    return token


def parse_line_at_cursor(lines: Sequence[str], cursor: CursorPosition) -> str | None:
    """Return the link target under the cursor, or None.

    Tried in order: a Markdown link (inline or reference), a bare URL, a
    reference definition line, then the path-like token under the cursor.

    Args:
        lines: Document lines, 0-indexed.
        cursor: Cursor position in the document.
    """
    if cursor.row >= len(lines):
        logger.info(f"No link found: row {cursor.row} is beyond the document")
        return None

    line = lines[cursor.row]

    span = locate_link_span(line, cursor.col)
    if span is not None:
        target = _markdown_link_target(span, cursor.col, lines)
        if target == _BLANK:
            logger.info(f"Inline link without target at {cursor.row}:{cursor.col}")
            return None
        if target is not None:
            logger.debug(f"Markdown {span.kind.value} link at {cursor.row}:{cursor.col}: {target}")
            return target

    inline_links = find_inline_links(line)
    url = _standalone_url(line, cursor.col, inline_links)
    if url is not None:
        logger.debug(f"URL at {cursor.row}:{cursor.col}: {url}")
        return url

    match = REFERENCE_DEFINITION_PATTERN.match(line)
    if match:
        target = match.group(2).strip()
        logger.debug(f"Reference definition at row {cursor.row}: {target}")
        return target

    token = _file_token(line, cursor.col, inline_links)
    if token is not None:
        logger.debug(f"File token at {cursor.row}:{cursor.col}: {token}")
        return token

    logger.info(f"No link found at {cursor.row}:{cursor.col}")
    return None
