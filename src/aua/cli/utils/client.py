"""Helpers connecting CLI commands to an AuaClient."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

import typer
from pydantic import ValidationError

from aua.cli.utils.output import print_error
from aua.client import AuaAPIError, AuaClient, AuaClientError, AuaTransportError
from aua.config import ClientConfig

T = TypeVar("T")


@dataclass
class CLIState:
    """Connection options collected by the root callback."""

    config_path: Path | None = None
    base_url: str | None = None
    token: str | None = None
    timeout: float | None = None

    def build_config(self) -> ClientConfig:
        """Merge the config file (if any) with command line overrides.

        Raises:
            typer.Exit: If no base URL is configured or the config is invalid.
        """
        data: dict[str, object] = {}
        if self.config_path is not None:
            try:
                data = ClientConfig.from_yaml(str(self.config_path)).model_dump()
            except (OSError, ValidationError) as e:
                print_error(f"Failed to load configuration: {e}")
                raise typer.Exit(1)
        for key in ("base_url", "token", "timeout"):
            value = getattr(self, key)
            if value is not None:
                data[key] = value

        if not data.get("base_url"):
            print_error("No base URL configured. Use --base-url, AUA_BASE_URL or --config.")
            raise typer.Exit(1)

        try:
            return ClientConfig.model_validate(data)
        except ValidationError as e:
            print_error(f"Invalid configuration: {e}")
            raise typer.Exit(1)


def get_state(ctx: typer.Context) -> CLIState:
    """Return the CLIState stored by the root callback."""
    state = ctx.find_root().obj
    if not isinstance(state, CLIState):
        state = CLIState()
        ctx.find_root().obj = state
    return state


def run_with_client(
    ctx: typer.Context,
    call: Callable[[AuaClient], Awaitable[T]],
) -> T:
    """Run ``call`` against a connected client and map client errors to exit 1."""
    config = get_state(ctx).build_config()

    async def _run() -> T:
        async with AuaClient(config) as client:
            return await call(client)

    try:
        return asyncio.run(_run())
    except AuaAPIError as e:
        print_error(f"Server reported error {e.code}: {e.message}")
        raise typer.Exit(1)
    except AuaTransportError as e:
        print_error(f"Request failed: {e}")
        raise typer.Exit(1)
    except AuaClientError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except (ValueError, ValidationError) as e:
        print_error(f"Invalid argument: {e}")
        raise typer.Exit(1)
