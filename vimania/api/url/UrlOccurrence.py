"""UrlOccurrence model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UrlOccurrence:
    """A URL found inside a line, as half-open offsets [start, end)."""

    start: int
    end: int
    url: str

    def contains(self, col: int) -> bool:
        return self.start <= col < self.end
