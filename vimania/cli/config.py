"""Config Typer app factory."""

import typer

from vimania.api.config.cmd_init import cmd_init
from vimania.api.config.cmd_show import cmd_show
from vimania.cli._domain_app import _domain_app
from vimania.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    app = _domain_app("config", "Show or create the configuration file")

    @app.command(name="show")
    def show_cmd() -> None:
        """Show the effective configuration."""
        _handle_stage_result(cmd_show)()

    @app.command(name="init")
    def init_cmd(
        force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
    ) -> None:
        """Write the default configuration to the config file."""
        _handle_stage_result(cmd_init)(force=force)

    return app
