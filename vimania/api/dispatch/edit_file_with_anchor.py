"""Open a file and search for literal anchor text."""

import os

from .EditorBuffer import EditorBuffer


def edit_file_with_anchor(arg: str, buffer: EditorBuffer) -> int | None:
    """Open ``path#anchor`` and move to the first line containing anchor.

    Returns the 0-indexed row found, or None when there is no anchor or it
    does not occur in the file.

    Raises:
        ValueError: If arg is empty
    """
    if not arg or not arg.strip():
        raise ValueError("No arguments provided to edit function")

    path, _, anchor = arg.partition("#")
    buffer.open_in_new_view(os.path.expanduser(path))
    if not anchor:
        return None

    for index, line in enumerate(buffer.get_lines()):
        if anchor in line:
            buffer.set_cursor(index, line.index(anchor))
            return index
    return None
