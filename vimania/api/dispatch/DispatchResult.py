"""DispatchResult model (UNO: single model)."""

from dataclasses import dataclass

from ..target.TargetKind import TargetKind


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of acting on a target.

    Attributes:
        kind: Kind of the dispatched target.
        action: "noop", "anchor", "browser", "editor" or "os".
        value: The URL, path or anchor acted upon.
        success: False when an external process failed to start.
    """

    kind: TargetKind
    action: str
    value: str
    success: bool = True
