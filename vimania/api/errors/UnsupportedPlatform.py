"""Unknown platform opener error."""

from .VimaniaError import VimaniaError


class UnsupportedPlatform(VimaniaError):
    """Raised when the OS has no known command for opening files and URLs."""

    def __init__(self, system: str):
        self.system = system
        super().__init__(f"Unsupported platform for opening files: {system}")
