from collections.abc import Sequence
from pathlib import Path


def should_open_in_editor(path: str, extensions: Sequence[str]) -> bool:
    """True when extensions is empty or lists the path's suffix."""
    if not extensions:
        return True
    return Path(path).suffix in extensions
