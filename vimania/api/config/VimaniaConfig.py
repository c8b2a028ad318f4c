"""Top-level Vimania configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import DEFAULT_EXTENSIONS, DEFAULT_TIMEOUT_MS
from ...utils.get_home_dir import get_home_dir
from .SecurityConfig import SecurityConfig


class VimaniaConfig(BaseModel):
    """Process-wide settings, constructed once and passed to the session."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXTENSIONS), description="Suffixes opened in the editor"
    )
    timeout: int = Field(DEFAULT_TIMEOUT_MS, gt=0, description="HTTP request timeout in milliseconds")
    browser_cmd: str | None = Field(None, description="Browser command overriding the OS default")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field("INFO", description="Logging level")
    key_mapping: str = Field("go", description="Key sequence hosts bind to handle-uri")
    security: SecurityConfig = Field(default_factory=SecurityConfig)

    @field_validator("extensions")
    @classmethod
    def _dotted_extensions(cls, v: list[str]) -> list[str]:
        return [ext if ext.startswith(".") else f".{ext}" for ext in v]

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on VIMANIA_HOME or default to ~/.vimania."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls, path: Path | None = None) -> "VimaniaConfig":
        """Load and validate config from file.

        A missing file yields the defaults.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = path or cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dictionary for serialization."""
        return self.model_dump(mode="python")

    def save(self, path: Path | None = None) -> None:
        """Save the configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = path or self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
