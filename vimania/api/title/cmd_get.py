"""Title get API command.

CLI: vimania title get <url>
"""

from collections.abc import Iterator

from .._output_schemas.title import TitleGetOutput
from ..errors import VimaniaError
from ..StageResult import StageResult
from .fetch_title import fetch_title


def cmd_get(url: str) -> StageResult:
    """Fetch the page title of a URL."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VimaniaConfig import VimaniaConfig

        yield (0.1, "Loading configuration...")
        try:
            config = VimaniaConfig.load()
            yield (0.3, f"Fetching {url}...")
            title = fetch_title(url, config.timeout, config.security)
        except (ValueError, VimaniaError) as e:
            result_obj.output = TitleGetOutput(errors=[str(e)], warnings=[], url=url, title=None).model_dump(
                mode="python"
            )
            result_obj.result = f"Failed to get title: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        result_obj.output = TitleGetOutput(errors=[], warnings=[], url=url, title=title).model_dump(mode="python")
        result_obj.result = title
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Getting title for {url}...",
        progress_callback=do_work,
    )
