"""Split a URL into scheme, host and path."""

import re

from .is_url import is_url
from .ParsedUrl import ParsedUrl

_URL_PARTS = re.compile(r"^(https?)://([^/?#]+)(.*)$")


def parse_url(url: str) -> ParsedUrl | None:
    """Return the URL's components, or None if it is not a URL."""
    if not is_url(url):
        return None
    url = url.strip()
    match = _URL_PARTS.match(url)
    if not match:
        return None
    return ParsedUrl(scheme=match.group(1), host=match.group(2), path=match.group(3), full_url=url)
