"""Dispatch handle API command.

CLI: vimania uri handle <file> --row R --col C
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from .._output_schemas.dispatch import DispatchHandleOutput
from ..errors import NoLinkAtCursor, VimaniaError
from ..link.CursorPosition import CursorPosition
from ..link.parse_line_at_cursor import parse_line_at_cursor
from ..StageResult import StageResult
from ..target.classify_target import classify_target
from ..target.TargetKind import TargetKind
from .FileBuffer import FileBuffer
from .SubprocessLauncher import SubprocessLauncher
from .UriDispatcher import UriDispatcher


def cmd_handle(file: Path, row: int, col: int) -> StageResult:
    """Resolve the link under the cursor and act on it.

    Editor actions open the target in a file-backed buffer; browser and OS
    actions start a detached process.
    """
    path = Path(file).expanduser()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VimaniaConfig import VimaniaConfig

        warnings: list[str] = []
        output: dict[str, Any] = {
            "file": str(path),
            "target": None,
            "kind": "noop",
            "action": "noop",
            "current_file": str(path),
            "row": row,
            "col": col,
        }

        def fail(message: str) -> None:
            result_obj.output = DispatchHandleOutput(errors=[message], warnings=warnings, **output).model_dump(
                mode="python"
            )
            result_obj.result = message
            result_obj.success = False

        yield (0.1, "Loading configuration...")
        try:
            config = VimaniaConfig.load()
        except ValueError as e:
            fail(str(e))
            yield (1.0, "Complete")
            return

        if not path.is_file():
            fail(f"File does not exist: {path}")
            yield (1.0, "Complete")
            return

        yield (0.3, "Parsing link at cursor...")
        buffer = FileBuffer(path, row=row, col=col)
        target = parse_line_at_cursor(buffer.get_lines(), CursorPosition(row=row, col=col))
        classified = classify_target(target)
        output["target"] = target
        output["kind"] = classified.kind.value

        def notify(message: str, level: int) -> None:
            if level >= logging.WARNING:
                warnings.append(message)

        dispatcher = UriDispatcher(config, buffer, SubprocessLauncher(), notify=notify, base_dir=path.parent)

        yield (0.6, f"Handling {classified.kind.value} target...")
        try:
            if classified.kind is TargetKind.NOOP:
                raise NoLinkAtCursor(f"No link found at {row}:{col}")
            dispatched = dispatcher.dispatch(classified)
        except NoLinkAtCursor as e:
            # Nothing to do is not a failure
            result_obj.output = DispatchHandleOutput(errors=[], warnings=warnings, **output).model_dump(mode="python")
            result_obj.result = str(e)
            result_obj.success = True
            yield (1.0, "Complete")
            return
        except VimaniaError as e:
            fail(str(e))
            yield (1.0, "Complete")
            return

        cursor_row, cursor_col = buffer.get_cursor()
        output.update(
            action=dispatched.action,
            current_file=str(buffer.path) if buffer.path else None,
            row=cursor_row,
            col=cursor_col,
        )
        result_obj.output = DispatchHandleOutput(errors=[], warnings=warnings, **output).model_dump(mode="python")
        result_obj.result = f"{dispatched.action}: {dispatched.value}"
        result_obj.success = dispatched.success
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Handling link at {path}:{row}:{col}...",
        progress_callback=do_work,
    )
