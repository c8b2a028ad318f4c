"""Title fetch failure."""

from .VimaniaError import VimaniaError


class FetchFailed(VimaniaError):
    """Raised when an HTTP fetch times out, fails, returns a non-200 status or an empty body."""
