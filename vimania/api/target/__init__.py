"""Link target classification."""

from .classify_target import PELICAN_PREFIXES, classify_target
from .parse_file_target import parse_file_target
from .ParsedFileTarget import ParsedFileTarget
from .should_open_in_editor import should_open_in_editor
from .Target import Target
from .TargetKind import TargetKind

__all__ = [
    "PELICAN_PREFIXES",
    "ParsedFileTarget",
    "Target",
    "TargetKind",
    "classify_target",
    "parse_file_target",
    "should_open_in_editor",
]
