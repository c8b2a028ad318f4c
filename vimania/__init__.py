"""Vimania - resolve the link under the cursor and open it."""

__version__ = "2.0.0"
