"""Get Vimania home directory path or path under it."""

import os
from pathlib import Path

from ..constants import VIMANIA_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get Vimania home directory path or path under it.

    Checks VIMANIA_HOME environment variable first, defaults to ~/.vimania if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.vimania")
        >>> get_home_dir("config.json")
        Path("/Users/user/.vimania/config.json")
    """
    home_env = os.environ.get("VIMANIA_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / VIMANIA_HOME_EXT if user_home else Path.home() / VIMANIA_HOME_EXT

    return home / Path(*parts) if parts else home
