"""Missing page title error."""

from .VimaniaError import VimaniaError


class NoTitleFound(VimaniaError):
    """Raised when a fetched page has no usable <title> element."""
