"""Find every URL in a line."""

from .URL_PATTERN import URL_PATTERN
from .UrlOccurrence import UrlOccurrence


def find_all_url_occurrences(line: str) -> list[UrlOccurrence]:
    """Return all non-overlapping URL occurrences, left to right, greedy."""
    return [UrlOccurrence(start=m.start(), end=m.end(), url=m.group(0)) for m in URL_PATTERN.finditer(line)]
