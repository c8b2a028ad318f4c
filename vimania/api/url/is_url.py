"""Whole-string URL check."""

from typing import Any

from .URL_PATTERN import URL_PATTERN


def is_url(value: Any) -> bool:
    """Return True if the trimmed value is exactly one http(s) URL.

    A URL embedded in surrounding text is not a match; use
    find_all_url_occurrences for substrings.
    """
    if not isinstance(value, str):
        return False
    return URL_PATTERN.fullmatch(value.strip()) is not None
