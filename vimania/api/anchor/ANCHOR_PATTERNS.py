import re

# Markdown ATX heading: "## Title"
HEADING_PATTERN = re.compile(r"^#+\s*(.+)$")

# Attribute list custom ID: "{: #custom-id .class}"
ATTR_LIST_PATTERN = re.compile(r"\{:\s*#([\w\-]+)[^}]*\}")
