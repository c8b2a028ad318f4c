"""Anchor lookup failure."""

from .VimaniaError import VimaniaError


class AnchorNotFound(VimaniaError):
    """Raised when no heading or custom ID matches an anchor."""

    def __init__(self, anchor: str):
        self.anchor = anchor
        super().__init__(f"Anchor not found: {anchor}")
