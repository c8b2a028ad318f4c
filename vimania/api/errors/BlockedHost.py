"""SSRF policy violation."""

from .VimaniaError import VimaniaError


class BlockedHost(VimaniaError):
    """Raised when a URL points at a loopback or private network host."""

    def __init__(self, host: str):
        self.host = host
        super().__init__(f"Access to internal/local networks is not allowed: {host}")
