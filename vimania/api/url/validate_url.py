"""URL validation (SSRF protection)."""

from ..config.SecurityConfig import SecurityConfig
from ..errors import BlockedHost, InvalidUrl
from .is_local_network import is_local_network
from .parse_url import parse_url
from .ParsedUrl import ParsedUrl


def validate_url(url: str, security: SecurityConfig) -> ParsedUrl:
    """Check a URL against the security policy before any network access.

    Raises:
        InvalidUrl: If the URL does not parse or its scheme is not allowed
        BlockedHost: If local networks are blocked and the host is local
    """
    parsed = parse_url(url)
    if parsed is None:
        raise InvalidUrl(f"Invalid URL format: {url}")

    if parsed.scheme not in security.allowed_schemes:
        raise InvalidUrl(f"Unsupported URL scheme: {parsed.scheme}")

    if security.block_local_networks and is_local_network(parsed.host):
        raise BlockedHost(parsed.host)

    return parsed
