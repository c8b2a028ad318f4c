"""Detect the platform command that opens files and URLs."""

import platform

from ..errors import UnsupportedPlatform


def _detect_open_command() -> list[str]:
    """Return the opener argv prefix for the current platform.

    Raises:
        UnsupportedPlatform: If the platform has no known opener
    """
    system = platform.system().lower()
    if system == "darwin":
        return ["open"]
    if system == "linux":
        return ["xdg-open"]
    if system == "windows":
        return ["cmd", "/c", "start", ""]
    raise UnsupportedPlatform(system)
