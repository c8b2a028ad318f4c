"""Output schemas for dispatch commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class DispatchHandleOutput(BaseOutputSchema):
    """Output schema for dispatch handle command."""

    file: str = Field(..., description="Document the cursor was in")
    target: str | None = Field(..., description="Resolved link target")
    kind: str = Field(..., description="Classified target kind")
    action: str = Field(..., description="Action taken: noop, anchor, browser, editor or os")
    current_file: str | None = Field(..., description="Document open after the action")
    row: int | None = Field(..., description="0-indexed cursor row after the action")
    col: int | None = Field(..., description="0-indexed cursor column after the action")


class DispatchEditOutput(BaseOutputSchema):
    """Output schema for dispatch edit command."""

    path: str = Field(..., description="Opened file path")
    anchor: str = Field(..., description="Searched anchor text, empty if none")
    row: int | None = Field(..., description="0-indexed cursor row after the search")


register_output_schema("dispatch", "handle", DispatchHandleOutput)
register_output_schema("dispatch", "edit", DispatchEditOutput)
