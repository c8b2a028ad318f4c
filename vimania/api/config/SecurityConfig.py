"""Security configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants import DEFAULT_ALLOWED_SCHEMES


class SecurityConfig(BaseModel):
    """URL security policy applied before any network access."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    block_local_networks: bool = Field(True, description="Block loopback and private network hosts (SSRF)")
    allowed_schemes: list[str] = Field(
        default_factory=lambda: list(DEFAULT_ALLOWED_SCHEMES), description="URL schemes that may be fetched or opened"
    )

    @field_validator("allowed_schemes")
    @classmethod
    def _lower_schemes(cls, v: list[str]) -> list[str]:
        return [scheme.lower() for scheme in v]
