"""LinkSpan model (UNO: single model)."""

from dataclasses import dataclass

from .LinkKind import LinkKind


@dataclass(frozen=True)
class LinkSpan:
    """The part of a line belonging to one link construct.

    The range is half-open: raw_text == line[start_col:end_col].
    """

    start_col: int
    end_col: int
    raw_text: str
    kind: LinkKind

    def contains(self, col: int) -> bool:
        return self.start_col <= col < self.end_col
