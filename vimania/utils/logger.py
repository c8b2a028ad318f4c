import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified Vimania logging.

    Args:
        home: Vimania home directory. If None, derived from environment.
        level: Level name (DEBUG, INFO, WARNING, ERROR)
    """
    global _CONFIGURED
    root_logger = logging.getLogger("vimania")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    if _CONFIGURED:
        return

    if home is None:
        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "vimania.log"

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def reset_logging() -> None:
    """Detach the handlers installed by configure_logging."""
    global _CONFIGURED
    root_logger = logging.getLogger("vimania")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    _CONFIGURED = False


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Logging itself is configured explicitly by the session at initialization.
    """
    return logging.getLogger(f"vimania.{name}")
