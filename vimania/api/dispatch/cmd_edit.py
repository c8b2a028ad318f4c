"""Dispatch edit API command.

CLI: vimania uri edit <path#anchor>
"""

from collections.abc import Iterator

from .._output_schemas.dispatch import DispatchEditOutput
from ..StageResult import StageResult
from .edit_file_with_anchor import edit_file_with_anchor
from .FileBuffer import FileBuffer


def cmd_edit(arg: str) -> StageResult:
    """Open a file and find the first line containing the anchor text."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        path, _, anchor = arg.partition("#")
        buffer = FileBuffer()

        yield (0.3, "Opening file...")
        try:
            row = edit_file_with_anchor(arg, buffer)
        except ValueError as e:
            result_obj.output = DispatchEditOutput(
                errors=[str(e)], warnings=[], path=path, anchor=anchor, row=None
            ).model_dump(mode="python")
            result_obj.result = str(e)
            result_obj.success = False
            yield (1.0, "Complete")
            return

        warnings = []
        if buffer.path is None or not buffer.path.is_file():
            warnings.append(f"New file: {buffer.path}")
        if anchor and row is None:
            warnings.append(f"Anchor text not found: {anchor}")

        result_obj.output = DispatchEditOutput(
            errors=[],
            warnings=warnings,
            path=str(buffer.path),
            anchor=anchor,
            row=row,
        ).model_dump(mode="python")
        result_obj.result = f"Opened {buffer.path}" + (f" at line {row}" if row is not None else "")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Editing {arg}...",
        progress_callback=do_work,
    )
