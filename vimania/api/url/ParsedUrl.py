"""ParsedUrl model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParsedUrl:
    """Scheme, host and path of a URL accepted by is_url."""

    scheme: str
    host: str
    path: str
    full_url: str
