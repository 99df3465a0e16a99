"""Main CLI application and entry point.

This module defines the main Typer application and aggregates all
command groups (song, user, assets, data, config).
"""

import logging
from pathlib import Path
from typing import Annotated

import typer

from aua.cli.commands import assets as assets_commands
from aua.cli.commands import config as config_commands
from aua.cli.commands import data as data_commands
from aua.cli.commands import song as song_commands
from aua.cli.commands import user as user_commands
from aua.cli.utils.client import CLIState

app = typer.Typer(
    name="aua",
    help="Command line client for the Arcaea Unlimited API",
    no_args_is_help=True,
    pretty_exceptions_enable=True,
)

# Add command groups
app.add_typer(song_commands.app, name="song", help="Song metadata lookups")
app.add_typer(user_commands.app, name="user", help="Player profiles and scores")
app.add_typer(assets_commands.app, name="assets", help="Image and chart downloads")
app.add_typer(data_commands.app, name="data", help="Miscellaneous service data")
app.add_typer(config_commands.app, name="config", help="Configuration utilities")


@app.callback()
def main_callback(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="YAML client configuration file",
            envvar="AUA_CONFIG",
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    base_url: Annotated[
        str | None,
        typer.Option("--base-url", help="AUA base URL", envvar="AUA_BASE_URL"),
    ] = None,
    token: Annotated[
        str | None,
        typer.Option("--token", help="Bearer token", envvar="AUA_TOKEN"),
    ] = None,
    timeout: Annotated[
        float | None,
        typer.Option("--timeout", help="Request timeout in seconds"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Arcaea Unlimited API client.

    Connection settings come from --config and may be overridden by the
    other options or their environment variables.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = CLIState(
        config_path=config_path,
        base_url=base_url,
        token=token,
        timeout=timeout,
    )


if __name__ == "__main__":
    app()
