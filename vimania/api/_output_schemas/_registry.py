"""(domain, command) -> output schema lookup."""

from pydantic import BaseModel

_SCHEMA_REGISTRY: dict[tuple[str, str], type[BaseModel]] = {}


def register_output_schema(domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
    """Register the schema of ``vimania.api.<domain>.cmd_<command_name>``.

    Raises:
        ValueError: If the command already has a schema
    """
    key = (domain, command_name)
    if key in _SCHEMA_REGISTRY:
        raise ValueError(f"Schema already registered for {domain}.{command_name}")
    _SCHEMA_REGISTRY[key] = schema_class


def get_output_schema(domain: str, command_name: str) -> type[BaseModel] | None:
    return _SCHEMA_REGISTRY.get((domain, command_name))
