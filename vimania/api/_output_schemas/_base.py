"""Shared fields of every command output."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Base schema for command outputs; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Error messages, empty on success")
    warnings: list[str] = Field(default_factory=list, description="Warning messages")
