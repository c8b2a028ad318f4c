"""URL matching and validation."""

from .find_all_url_occurrences import find_all_url_occurrences
from .is_local_network import is_local_network
from .is_url import is_url
from .parse_url import parse_url
from .ParsedUrl import ParsedUrl
from .URL_PATTERN import URL_PATTERN
from .UrlOccurrence import UrlOccurrence
from .validate_url import validate_url

__all__ = [
    "URL_PATTERN",
    "ParsedUrl",
    "UrlOccurrence",
    "find_all_url_occurrences",
    "is_local_network",
    "is_url",
    "parse_url",
    "validate_url",
]
