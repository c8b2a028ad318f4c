"""Output schemas for target commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class TargetClassifyOutput(BaseOutputSchema):
    """Output schema for target classify command."""

    target: str = Field(..., description="Target as given")
    kind: str = Field(..., description="noop, anchor, web, file or pelican")
    value: str = Field(..., description="Target with anchor marker or pelican prefix removed")
    path: str | None = Field(..., description="File path for file and pelican targets")
    line: int | None = Field(..., description="1-based line suffix, if any")
    anchor: str | None = Field(..., description="Anchor suffix, if any")
    open_in_editor: bool | None = Field(..., description="Whether a file target opens in the editor")


register_output_schema("target", "classify", TargetClassifyOutput)
