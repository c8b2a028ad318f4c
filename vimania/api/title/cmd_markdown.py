"""Title markdown API command.

CLI: vimania title markdown <url>
"""

from collections.abc import Iterator

from ...constants import UNKNOWN_URL_TITLE
from .._output_schemas.title import TitleMarkdownOutput
from ..errors import VimaniaError
from ..StageResult import StageResult
from ..url.is_url import is_url
from .build_markdown_link import build_markdown_link
from .fetch_title import fetch_title


def cmd_markdown(url: str) -> StageResult:
    """Build a Markdown link for a URL, titled with the page title.

    A failed fetch still produces a link, titled UNKNOWN_URL_TITLE.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VimaniaConfig import VimaniaConfig

        url_clean = url.strip()
        if not is_url(url_clean):
            result_obj.output = TitleMarkdownOutput(
                errors=[f"Not a URL: {url}"], warnings=[], url=url, title=UNKNOWN_URL_TITLE, markdown=""
            ).model_dump(mode="python")
            result_obj.result = f"Not a URL: {url}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.1, "Loading configuration...")
        try:
            config = VimaniaConfig.load()
        except ValueError as e:
            result_obj.output = TitleMarkdownOutput(
                errors=[str(e)], warnings=[], url=url_clean, title=UNKNOWN_URL_TITLE, markdown=""
            ).model_dump(mode="python")
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.3, f"Fetching {url_clean}...")
        warnings = []
        try:
            title = fetch_title(url_clean, config.timeout, config.security)
        except VimaniaError as e:
            warnings.append(f"Could not get title: {e}")
            title = UNKNOWN_URL_TITLE

        markdown = build_markdown_link(title, url_clean)
        result_obj.output = TitleMarkdownOutput(
            errors=[], warnings=warnings, url=url_clean, title=title, markdown=markdown
        ).model_dump(mode="python")
        result_obj.result = markdown
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Building Markdown link for {url}...",
        progress_callback=do_work,
    )
