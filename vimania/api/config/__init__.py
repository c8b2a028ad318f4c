"""Config API module."""

from .SecurityConfig import SecurityConfig
from .VimaniaConfig import VimaniaConfig

__all__ = ["SecurityConfig", "VimaniaConfig"]
