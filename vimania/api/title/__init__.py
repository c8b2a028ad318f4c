"""Web page title fetching."""

from .build_markdown_link import build_markdown_link
from .extract_title_from_html import extract_title_from_html
from .fetch_title import fetch_title
from .TitleFetcher import TitleFetcher

__all__ = ["TitleFetcher", "build_markdown_link", "extract_title_from_html", "fetch_title"]
