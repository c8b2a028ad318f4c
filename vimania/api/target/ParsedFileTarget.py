"""ParsedFileTarget model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedFileTarget:
    """A file link decomposed into path, optional 1-based line and anchor."""

    path: str
    line: int | None = None
    anchor: str | None = None
