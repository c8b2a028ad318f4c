"""Output schemas for all API commands; importing registers them."""

from . import config, dispatch, link, target, title
from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = [
    "BaseOutputSchema",
    "config",
    "dispatch",
    "get_output_schema",
    "link",
    "register_output_schema",
    "target",
    "title",
]
