"""Classify a resolved link target."""

from ..url.is_url import is_url
from .parse_file_target import parse_file_target
from .Target import Target
from .TargetKind import TargetKind

PELICAN_PREFIXES = ("|filename|", "{filename}")


def classify_target(target: str | None) -> Target:
    """Decide what kind of destination a link target names.

    Priority: empty, ``#anchor``, web URL, Pelican ``{filename}`` link, file.
    """
    value = target.strip() if target else ""
    if not value:
        return Target(kind=TargetKind.NOOP, value="")

    if value.startswith("#"):
        return Target(kind=TargetKind.ANCHOR, value=value[1:])

    if is_url(value):
        return Target(kind=TargetKind.WEB, value=value)

    for prefix in PELICAN_PREFIXES:
        if value.startswith(prefix):
            remainder = value[len(prefix) :]
            return Target(kind=TargetKind.PELICAN, value=remainder, file=parse_file_target(remainder))

    return Target(kind=TargetKind.FILE, value=value, file=parse_file_target(value))
