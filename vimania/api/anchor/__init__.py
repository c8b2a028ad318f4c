"""Anchor resolution: heading slugs and custom IDs."""

from .find_anchor_line import find_anchor_line
from .title_to_anchor import title_to_anchor

__all__ = ["find_anchor_line", "title_to_anchor"]
