import re

_TITLE_PATTERN = re.compile(r"<title[^>]*>([^<]*)</title>", re.IGNORECASE)

_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&nbsp;": " ",
}
_ENTITY_PATTERN = re.compile("|".join(map(re.escape, _ENTITIES)))


def extract_title_from_html(html: str | None) -> str | None:
    """Return the trimmed text of the first <title> element, or None.

    Entities are decoded in a single pass, so "&amp;lt;" stays "&lt;".
    """
    if not html:
        return None

    match = _TITLE_PATTERN.search(html)
    if not match:
        return None

    title = _ENTITY_PATTERN.sub(lambda m: _ENTITIES[m.group(0)], match.group(1)).strip()
    return title or None
