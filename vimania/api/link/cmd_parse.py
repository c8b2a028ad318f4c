"""Link parse API command.

CLI: vimania link parse <file> --row R --col C
"""

from collections.abc import Iterator
from pathlib import Path

from .._output_schemas.link import LinkParseOutput
from ..StageResult import StageResult
from .CursorPosition import CursorPosition
from .parse_line_at_cursor import parse_line_at_cursor
from .read_document import read_document


def cmd_parse(file: Path, row: int, col: int) -> StageResult:
    """Resolve the link target under a cursor position in a file.

    Args:
        file: Markdown (or any text) document.
        row: 0-indexed cursor row.
        col: 0-indexed cursor column.
    """
    path = Path(file).expanduser()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Reading document...")
        if not path.is_file():
            result_obj.output = LinkParseOutput(
                errors=[f"File does not exist: {path}"],
                warnings=[],
                file=str(path),
                row=row,
                col=col,
                found=False,
                target=None,
            ).model_dump(mode="python")
            result_obj.result = f"File does not exist: {path}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        lines = read_document(path)

        yield (0.6, "Parsing line at cursor...")
        target = parse_line_at_cursor(lines, CursorPosition(row=row, col=col))

        result_obj.output = LinkParseOutput(
            errors=[],
            warnings=[],
            file=str(path),
            row=row,
            col=col,
            found=target is not None,
            target=target,
        ).model_dump(mode="python")
        result_obj.result = f"Link target: {target}" if target is not None else "No link found at cursor"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Parsing link at {path}:{row}:{col}...",
        progress_callback=do_work,
    )
