"""Editor-facing session."""

from .Vimania import Vimania

__all__ = ["Vimania"]
