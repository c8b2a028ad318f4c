def build_markdown_link(title: str, url: str) -> str:
    return f"[{title}]({url})"
