"""Shared constants for Vimania dot-directories and defaults."""

VIMANIA_HOME_EXT = ".vimania"  # user-level state/config directory suffix

# File extensions opened in the editor; everything else goes to the OS
DEFAULT_EXTENSIONS = [".md", ".txt", ".rst", ".py", ".conf", ".sh", ".json", ".yaml", ".yml"]

DEFAULT_TIMEOUT_MS = 3000

DEFAULT_ALLOWED_SCHEMES = ["http", "https"]

# Placeholder inserted when a page title cannot be fetched
UNKNOWN_URL_TITLE = "UNKNOWN_URL_TITLE"

USER_AGENT = "vimania/2.0.0"
