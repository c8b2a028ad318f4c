"""Link Typer app factory."""

from pathlib import Path

import typer

from vimania.api.link.cmd_next import cmd_next
from vimania.api.link.cmd_parse import cmd_parse
from vimania.api.link.cmd_prev import cmd_prev
from vimania.cli._domain_app import _domain_app
from vimania.cli._handle_stage_result import _handle_stage_result


def link() -> typer.Typer:
    app = _domain_app("link", "Find and resolve Markdown links")

    @app.command(name="parse")
    def parse_cmd(
        file: Path = typer.Argument(..., help="Document to parse"),
        row: int = typer.Option(0, "--row", "-r", min=0, help="0-indexed cursor row"),
        col: int = typer.Option(0, "--col", "-c", min=0, help="0-indexed cursor column"),
    ) -> None:
        """Resolve the link target under the cursor."""
        _handle_stage_result(cmd_parse)(file=file, row=row, col=col)

    @app.command(name="next")
    def next_cmd(
        file: Path = typer.Argument(..., help="Document to search"),
        row: int = typer.Option(0, "--row", "-r", min=0, help="0-indexed cursor row"),
        col: int = typer.Option(0, "--col", "-c", min=0, help="0-indexed cursor column"),
    ) -> None:
        """Find the next link after the cursor."""
        _handle_stage_result(cmd_next)(file=file, row=row, col=col)

    @app.command(name="prev")
    def prev_cmd(
        file: Path = typer.Argument(..., help="Document to search"),
        row: int = typer.Option(0, "--row", "-r", min=0, help="0-indexed cursor row"),
        col: int = typer.Option(0, "--col", "-c", min=0, help="0-indexed cursor column"),
    ) -> None:
        """Find the previous link before the cursor."""
        _handle_stage_result(cmd_prev)(file=file, row=row, col=col)

    return app
