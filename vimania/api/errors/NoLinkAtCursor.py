"""No link at cursor."""

from .VimaniaError import VimaniaError


class NoLinkAtCursor(VimaniaError):
    """Raised by commands that require a link when none is found under the cursor."""
