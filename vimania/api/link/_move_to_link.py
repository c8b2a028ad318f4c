from collections.abc import Callable, Iterator, Sequence
from pathlib import Path

from .._output_schemas.link import LinkMoveOutput
from ..StageResult import StageResult
from .CursorPosition import CursorPosition
from .read_document import read_document


def _move_to_link(
    file: Path,
    row: int,
    col: int,
    finder: Callable[[Sequence[str], CursorPosition], CursorPosition | None],
    direction: str,
) -> StageResult:
    """Shared body of the next/prev link commands."""
    path = Path(file).expanduser()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Reading document...")
        if not path.is_file():
            result_obj.output = LinkMoveOutput(
                errors=[f"File does not exist: {path}"],
                warnings=[],
                file=str(path),
                found=False,
                row=None,
                col=None,
            ).model_dump(mode="python")
            result_obj.result = f"File does not exist: {path}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        lines = read_document(path)

        yield (0.6, f"Searching for {direction} link...")
        position = finder(lines, CursorPosition(row=row, col=col))

        result_obj.output = LinkMoveOutput(
            errors=[],
            warnings=[],
            file=str(path),
            found=position is not None,
            row=position.row if position else None,
            col=position.col if position else None,
        ).model_dump(mode="python")
        if position is None:
            result_obj.result = f"No {direction} link"
        else:
            result_obj.result = f"{direction.capitalize()} link at {position.row}:{position.col}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Finding {direction} link from {path}:{row}:{col}...",
        progress_callback=do_work,
    )
