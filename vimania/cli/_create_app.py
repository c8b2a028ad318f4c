"""Create the main Typer CLI app."""

import typer

from vimania.cli.config import config
from vimania.cli.constants import DISPLAY_FORMATS, TYPER_SETTINGS
from vimania.cli.link import link
from vimania.cli.title import title
from vimania.cli.uri import uri


def _create_app() -> typer.Typer:
    """Root app: the --display option plus one sub-app per domain."""
    app = typer.Typer(help="Open what the Markdown link under the cursor points at", **TYPER_SETTINGS)

    for factory in (link, uri, title, config):
        app.add_typer(factory(), name=factory.__name__)

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in DISPLAY_FORMATS:
            choices = " or ".join(repr(fmt) for fmt in DISPLAY_FORMATS)
            typer.echo(f"Error: --display must be {choices}, got {display!r}", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
