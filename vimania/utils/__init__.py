"""Utility helpers shared across Vimania."""

from .get_home_dir import get_home_dir
from .logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_home_dir", "get_logger"]
