"""Fetch the <title> of a web page."""

import requests

from ...constants import USER_AGENT
from ...utils.logger import get_logger
from ..config.SecurityConfig import SecurityConfig
from ..errors import FetchFailed, NoTitleFound
from ..url.validate_url import validate_url
from .extract_title_from_html import extract_title_from_html

logger = get_logger("title")


def fetch_title(url: str, timeout_ms: int, security: SecurityConfig) -> str:
    """GET url and return its page title.

    The URL is validated against the security settings before any request.

    Raises:
        InvalidUrl: If the URL is malformed or its scheme is not allowed
        BlockedHost: If the host is on a local network and those are blocked
        FetchFailed: On connection errors, timeouts, non-200 status or empty body
        NoTitleFound: If the page has no usable <title>
    """
    validate_url(url, security)
    logger.info(f"Fetching URL title for: {url}")

    try:
        response = requests.get(url, timeout=timeout_ms / 1000, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as e:
        raise FetchFailed(f"HTTP request failed: {e}") from e

    if response.status_code != 200:
        raise FetchFailed(f"HTTP request failed with status {response.status_code}")

    if not response.text:
        raise FetchFailed("Empty response body")

    title = extract_title_from_html(response.text)
    if title is None:
        raise NoTitleFound("No title element found")

    logger.debug(f"Title for {url}: {title}")
    return title
