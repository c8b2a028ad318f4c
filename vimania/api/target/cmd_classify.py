"""Target classify API command.

CLI: vimania uri classify <target>
"""

from collections.abc import Iterator

from .._output_schemas.target import TargetClassifyOutput
from ..StageResult import StageResult
from .classify_target import classify_target
from .should_open_in_editor import should_open_in_editor


def cmd_classify(target: str) -> StageResult:
    """Classify a link target without acting on it."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from ..config.VimaniaConfig import VimaniaConfig

        yield (0.2, "Loading configuration...")
        try:
            config = VimaniaConfig.load()
        except ValueError as e:
            result_obj.output = TargetClassifyOutput(
                errors=[str(e)],
                warnings=[],
                target=target,
                kind="noop",
                value="",
                path=None,
                line=None,
                anchor=None,
                open_in_editor=None,
            ).model_dump(mode="python")
            result_obj.result = f"Failed to load configuration: {e}"
            result_obj.success = False
            yield (1.0, "Complete")
            return

        yield (0.6, "Classifying target...")
        classified = classify_target(target)
        file = classified.file

        result_obj.output = TargetClassifyOutput(
            errors=[],
            warnings=[],
            target=target,
            kind=classified.kind.value,
            value=classified.value,
            path=file.path if file else None,
            line=file.line if file else None,
            anchor=file.anchor if file else None,
            open_in_editor=should_open_in_editor(file.path, config.extensions) if file else None,
        ).model_dump(mode="python")
        result_obj.result = f"{classified.kind.value}: {classified.value}"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Classifying {target}...",
        progress_callback=do_work,
    )
