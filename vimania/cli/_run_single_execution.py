"""Drive a StageResult through announce, progress, result and output."""

import sys
from collections.abc import Callable

from vimania.api.StageResult import StageResult
from vimania.api.validate_output import validate_output
from vimania.cli.display.CLIDisplay import CLIDisplay


def _require_complete(stage: StageResult) -> None:
    if not stage.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not stage.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")


def _run_single_execution(
    func: Callable[..., StageResult],
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    display_format: str,
) -> None:
    """Run ``func`` once, render every stage and exit with its status.

    Domain errors are expected in the output's ``errors`` list; anything
    raised here is a programming error.
    """
    stage = func(*args, **kwargs)
    display.status(stage.announce)

    for fraction, message in stage.progress_callback(stage):
        display.info(f"[dim]{display.timestamp()}[/dim] Progress: {message} ({fraction:.1%})")

    _require_complete(stage)
    stage.output = validate_output(func, stage.output)

    for warning in stage.output.get("warnings", []):
        display.warning(warning)
    (display.success if stage.success else display.error)(stage.result)

    display.json_output(stage.output, format=display_format)
    sys.exit(0 if stage.success else 1)
