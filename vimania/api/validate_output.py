"""Check command output dicts against their registered schema."""

from collections.abc import Callable
from typing import Any

from . import _output_schemas


def _command_key(func: Callable) -> tuple[str, str] | None:
    """(domain, command) for ``vimania.api.<domain>.cmd_<command>``, else None."""
    parts = func.__module__.split(".")
    if len(parts) < 3 or parts[:2] != ["vimania", "api"]:
        return None
    if not func.__name__.startswith("cmd_"):
        return None
    return parts[2], func.__name__.removeprefix("cmd_")


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Return output re-serialized through the command's schema.

    Functions outside the command layout, or without a registered schema,
    pass through unchanged.

    Raises:
        ValueError: If output does not fit the schema
    """
    key = _command_key(func)
    schema_class = _output_schemas.get_output_schema(*key) if key else None
    if schema_class is None:
        return output

    domain, command_name = key
    try:
        return schema_class(**output).model_dump(mode="python")
    except Exception as e:
        raise ValueError(
            f"Output validation failed for {domain}.{command_name}: {e}\nGot output: {output}"
        ) from e
