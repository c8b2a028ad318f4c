"""Typer sub-app shared settings."""

import typer

from vimania.cli.constants import TYPER_SETTINGS


def _domain_app(name: str, help: str) -> typer.Typer:
    """Create a domain sub-app that prints its help when called bare."""
    app = typer.Typer(name=name, help=help, **TYPER_SETTINGS)

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
