"""TargetKind enum for classified link targets."""

from enum import Enum


class TargetKind(str, Enum):
    NOOP = "noop"
    ANCHOR = "anchor"
    WEB = "web"
    FILE = "file"
    PELICAN = "pelican"
