"""Output schemas for link commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class LinkParseOutput(BaseOutputSchema):
    """Output schema for link parse command."""

    file: str = Field(..., description="Parsed document path")
    row: int = Field(..., description="0-indexed cursor row")
    col: int = Field(..., description="0-indexed cursor column")
    found: bool = Field(..., description="Whether a link was found under the cursor")
    target: str | None = Field(..., description="Resolved link target, None if nothing was found")


class LinkMoveOutput(BaseOutputSchema):
    """Output schema for link next/prev commands."""

    file: str = Field(..., description="Searched document path")
    found: bool = Field(..., description="Whether another link was found")
    row: int | None = Field(..., description="0-indexed row of the link start")
    col: int | None = Field(..., description="0-indexed column of the link start")


register_output_schema("link", "parse", LinkParseOutput)
register_output_schema("link", "next", LinkMoveOutput)
register_output_schema("link", "prev", LinkMoveOutput)
