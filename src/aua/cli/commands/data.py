"""Data subcommands for miscellaneous service information."""

import typer

from aua.cli.utils.client import run_with_client
from aua.cli.utils.output import console

app = typer.Typer(no_args_is_help=True)


@app.command("update")
def update(ctx: typer.Context) -> None:
    """Show the latest game package version and download URL."""
    content = run_with_client(ctx, lambda c: c.data.update())
    console.print(f"[bold]Version:[/bold] {content.version}")
    console.print(f"[bold]URL:[/bold] {content.url}")
