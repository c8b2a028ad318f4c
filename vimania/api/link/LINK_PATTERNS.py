import re

# [text](target) over a whole inline span; greedy text keeps nested brackets
INLINE_LINK_PATTERN = re.compile(r"^\[(.*)\]\(([^)]*)\)$")

# [text][ref] or [text][]
REFERENCE_LINK_PATTERN = re.compile(r"^\[([^\]]*)\]\[([^\]]*)\]")

# [ref]: target
REFERENCE_DEFINITION_PATTERN = re.compile(r"^\s*\[([^\]]*)\]:\s*(.+)$")

# Characters that rule out a bare token as a file path
INVALID_PATH_CHARS = re.compile(r"[*?|\"'<>!]")
