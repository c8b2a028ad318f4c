"""GitHub-style heading slugs."""

import re

# ASCII punctuation without the hyphen
_PUNCTUATION = re.compile(r"[\"#$%&'()*+,./:;<=>?@\[\\\]^_`{|}~!]")
_WHITESPACE = re.compile(r"\s+")


def title_to_anchor(title: str | None) -> str:
    """Convert a heading title to its anchor slug.

    >>> title_to_anchor("Hello, World!")
    'hello-world'
    """
    if not title:
        return ""
    slug = _PUNCTUATION.sub("", title)
    return _WHITESPACE.sub("-", slug.lower())
