"""Target model (UNO: single model)."""

from dataclasses import dataclass

from .ParsedFileTarget import ParsedFileTarget
from .TargetKind import TargetKind


@dataclass(frozen=True)
class Target:
    """A classified link target.

    Attributes:
        kind: What the target points at.
        value: The target with its anchor marker or Pelican prefix removed.
        file: Path decomposition for FILE and PELICAN targets, else None.
    """

    kind: TargetKind
    value: str
    file: ParsedFileTarget | None = None
