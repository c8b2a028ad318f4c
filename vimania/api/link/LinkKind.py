"""LinkKind enum for located link spans."""

from enum import Enum


class LinkKind(str, Enum):
    INLINE = "inline"
    REFERENCE = "reference"
