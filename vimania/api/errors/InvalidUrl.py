"""Invalid URL error."""

from .VimaniaError import VimaniaError


class InvalidUrl(VimaniaError):
    """Raised when a URL is malformed or uses a scheme that is not allowed."""
