"""Markdown link location and resolution."""

from .CursorPosition import CursorPosition
from .find_inline_links import find_inline_links
from .find_link_starts import find_link_starts
from .find_next_link import find_next_link
from .find_prev_link import find_prev_link
from .LinkKind import LinkKind
from .LinkSpan import LinkSpan
from .locate_link_span import locate_link_span
from .parse_line_at_cursor import parse_line_at_cursor
from .read_document import read_document
from .resolve_reference import resolve_reference

__all__ = [
    "CursorPosition",
    "LinkKind",
    "LinkSpan",
    "find_inline_links",
    "find_link_starts",
    "find_next_link",
    "find_prev_link",
    "locate_link_span",
    "parse_line_at_cursor",
    "read_document",
    "resolve_reference",
]
