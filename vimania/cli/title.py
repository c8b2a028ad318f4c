"""Title Typer app factory."""

import typer

from vimania.api.title.cmd_get import cmd_get
from vimania.api.title.cmd_markdown import cmd_markdown
from vimania.cli._domain_app import _domain_app
from vimania.cli._handle_stage_result import _handle_stage_result


def title() -> typer.Typer:
    app = _domain_app("title", "Fetch web page titles")

    @app.command(name="get")
    def get_cmd(url: str = typer.Argument(..., help="Web page URL")) -> None:
        """Fetch the page title of a URL."""
        _handle_stage_result(cmd_get)(url)

    @app.command(name="markdown")
    def markdown_cmd(url: str = typer.Argument(..., help="Web page URL")) -> None:
        """Build a [title](url) Markdown link."""
        _handle_stage_result(cmd_markdown)(url)

    return app
