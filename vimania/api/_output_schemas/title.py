"""Output schemas for title commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class TitleGetOutput(BaseOutputSchema):
    """Output schema for title get command."""

    url: str = Field(..., description="Requested URL")
    title: str | None = Field(..., description="Page title, None on failure")


class TitleMarkdownOutput(BaseOutputSchema):
    """Output schema for title markdown command."""

    url: str = Field(..., description="Requested URL")
    title: str = Field(..., description="Page title or the unknown-title placeholder")
    markdown: str = Field(..., description="Markdown link [title](url)")


register_output_schema("title", "get", TitleGetOutput)
register_output_schema("title", "markdown", TitleMarkdownOutput)
