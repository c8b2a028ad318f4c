"""URI Typer app factory."""

from pathlib import Path

import typer

from vimania.api.dispatch.cmd_edit import cmd_edit
from vimania.api.dispatch.cmd_handle import cmd_handle
from vimania.api.target.cmd_classify import cmd_classify
from vimania.cli._domain_app import _domain_app
from vimania.cli._handle_stage_result import _handle_stage_result


def uri() -> typer.Typer:
    app = _domain_app("uri", "Classify and open link targets")

    @app.command(name="classify")
    def classify_cmd(
        target: str = typer.Argument(..., help="Link target, e.g. notes.md:12#intro"),
    ) -> None:
        """Classify a link target without opening it."""
        _handle_stage_result(cmd_classify)(target)

    @app.command(name="handle")
    def handle_cmd(
        file: Path = typer.Argument(..., help="Document containing the link"),
        row: int = typer.Option(0, "--row", "-r", min=0, help="0-indexed cursor row"),
        col: int = typer.Option(0, "--col", "-c", min=0, help="0-indexed cursor column"),
    ) -> None:
        """Open whatever the link under the cursor points at."""
        _handle_stage_result(cmd_handle)(file=file, row=row, col=col)

    @app.command(name="edit")
    def edit_cmd(
        arg: str = typer.Argument(..., help="path#anchor"),
    ) -> None:
        """Open a file at the first line containing the anchor text."""
        _handle_stage_result(cmd_edit)(arg)

    return app
