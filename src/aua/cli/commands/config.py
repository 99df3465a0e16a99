"""Config subcommands for configuration management."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError

from aua.cli.utils.output import console, print_error, print_success, print_warning
from aua.config import ClientConfig

app = typer.Typer(no_args_is_help=True)


@app.command("validate")
def validate(
    config_path: Annotated[
        Path,
        typer.Argument(
            help="Path to configuration file to validate",
            exists=True,
            dir_okay=False,
        ),
    ],
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show detailed configuration"),
    ] = False,
) -> None:
    """Validate a client configuration file.

    Examples:
        aua config validate aua.yaml
        aua config validate aua.yaml --verbose
    """
    try:
        with open(config_path) as f:
            raw_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        print_error(f"Invalid YAML syntax: {e}")
        raise typer.Exit(1)

    if raw_data is None:
        print_error("Configuration file is empty")
        raise typer.Exit(1)

    if not isinstance(raw_data, dict):
        print_error("Configuration must be a YAML mapping (dictionary)")
        raise typer.Exit(1)

    try:
        config = ClientConfig.model_validate(raw_data)
    except ValidationError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    warnings: list[str] = []
    unknown = sorted(set(raw_data) - set(ClientConfig.model_fields))
    if unknown:
        warnings.append(f"Unknown keys are ignored: {', '.join(unknown)}")
    if not config.token:
        warnings.append("No token configured - most AUA deployments require one")
    if config.base_url.startswith("http://"):
        warnings.append("base_url uses plain HTTP - the token is sent unencrypted")

    print_success(f"Configuration is valid: {config_path}")

    if warnings:
        console.print()
        for warning in warnings:
            print_warning(warning)

    if verbose:
        console.print()
        console.print(repr(config))


@app.command("init")
def init(
    config_path: Annotated[
        Path,
        typer.Argument(help="Where to write the configuration file", dir_okay=False),
    ],
    base_url: Annotated[
        str,
        typer.Option("--base-url", help="Base URL of the AUA server"),
    ],
    token: Annotated[
        str | None,
        typer.Option("--token", help="Bearer token"),
    ] = None,
    timeout: Annotated[
        float,
        typer.Option("--timeout", help="Request timeout in seconds"),
    ] = 30.0,
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing file"),
    ] = False,
) -> None:
    """Write a new client configuration file."""
    if config_path.exists() and not force:
        print_error(f"{config_path} already exists (use --force to overwrite)")
        raise typer.Exit(1)

    try:
        config = ClientConfig(base_url=base_url, token=token, timeout=timeout)
    except ValidationError as e:
        print_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    config.to_yaml(str(config_path))
    print_success(f"Configuration written to {config_path}")
