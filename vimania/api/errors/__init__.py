"""Error kinds raised by the Vimania API."""

from .AnchorNotFound import AnchorNotFound
from .BlockedHost import BlockedHost
from .FetchFailed import FetchFailed
from .FileNotReadable import FileNotReadable
from .InvalidUrl import InvalidUrl
from .NoLinkAtCursor import NoLinkAtCursor
from .NoTitleFound import NoTitleFound
from .UnsupportedPlatform import UnsupportedPlatform
from .VimaniaError import VimaniaError

__all__ = [
    "AnchorNotFound",
    "BlockedHost",
    "FetchFailed",
    "FileNotReadable",
    "InvalidUrl",
    "NoLinkAtCursor",
    "NoTitleFound",
    "UnsupportedPlatform",
    "VimaniaError",
]
