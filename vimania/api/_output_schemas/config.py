"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class ConfigShowOutput(BaseOutputSchema):
    config_path: str = Field(..., description="Path to the configuration file")
    exists: bool = Field(..., description="False when defaults are shown because the file is missing")
    content: dict[str, Any] = Field(..., description="Effective configuration")


class ConfigInitOutput(BaseOutputSchema):
    config_path: str = Field(..., description="Path to the configuration file")
    written: bool = Field(..., description="Whether the file was (re)written")


register_output_schema("config", "show", ConfigShowOutput)
register_output_schema("config", "init", ConfigInitOutput)
