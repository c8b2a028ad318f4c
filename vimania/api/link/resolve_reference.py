"""Resolve a reference label against its definition."""

import re
from collections.abc import Sequence


def resolve_reference(label: str, lines: Sequence[str]) -> str | None:
    """Return the target of the first ``[label]: target`` line, or None.

    Labels match exactly (case-sensitive) after trimming.
    """
    label = label.strip() if label else ""
    if not label:
        return None

    pattern = re.compile(r"^\s*\[" + re.escape(label) + r"\]:\s*(.+)$")
    for line in lines:
        match = pattern.match(line)
        if match:
            return match.group(1).strip()

    return None
