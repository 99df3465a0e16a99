"""Assets subcommands for downloading images and chart files."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from aua.cli.utils.client import run_with_client
from aua.cli.utils.output import print_error, print_success
from aua.models import Difficulty, SongQueryType

app = typer.Typer(no_args_is_help=True)

OutputOption = Annotated[
    Path,
    typer.Option("--output", "-o", help="File to write", dir_okay=False),
]
AwakenedOption = Annotated[
    bool,
    typer.Option("--awakened", "-a", help="Use the awakened art"),
]
DifficultyOption = Annotated[
    str,
    typer.Option("--difficulty", "-d", help="pst/prs/ftr/byd or 0-3"),
]
ByIdOption = Annotated[
    bool,
    typer.Option("--id", help="Treat SONG as a song id instead of a name"),
]


def _parse_difficulty(value: str) -> Difficulty:
    try:
        return Difficulty.parse(value)
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)


def _write(output: Path, data: bytes) -> None:
    try:
        output.write_bytes(data)
    except OSError as e:
        print_error(f"Failed to write {output}: {e}")
        raise typer.Exit(1)
    print_success(f"Wrote {len(data):,} bytes to {output}")


@app.command("icon")
def icon(
    ctx: typer.Context,
    partner: Annotated[int, typer.Argument(help="Partner id")],
    output: OutputOption,
    awakened: AwakenedOption = False,
) -> None:
    """Download a partner icon."""
    data = run_with_client(ctx, lambda c: c.assets.icon(partner, awakened))
    _write(output, data)


@app.command("char")
def char(
    ctx: typer.Context,
    partner: Annotated[int, typer.Argument(help="Partner id")],
    output: OutputOption,
    awakened: AwakenedOption = False,
) -> None:
    """Download partner character art."""
    data = run_with_client(ctx, lambda c: c.assets.char(partner, awakened))
    _write(output, data)


@app.command("song")
def song(
    ctx: typer.Context,
    song: Annotated[str, typer.Argument(help="Song name, song id or cover file name")],
    output: OutputOption,
    difficulty: DifficultyOption = "ftr",
    by_id: ByIdOption = False,
    by_file: Annotated[
        bool,
        typer.Option("--file", help="Treat SONG as a cover file name"),
    ] = False,
) -> None:
    """Download a song cover.

    Examples:
        aua assets song "Fracture Ray" -d byd -o cover.jpg
    """
    if by_id and by_file:
        print_error("--id and --file are mutually exclusive")
        raise typer.Exit(1)
    query_type = SongQueryType.SONG_NAME
    if by_id:
        query_type = SongQueryType.SONG_ID
    elif by_file:
        query_type = SongQueryType.FILE_NAME
    parsed = _parse_difficulty(difficulty)
    data = run_with_client(ctx, lambda c: c.assets.song(song, query_type, parsed))
    _write(output, data)


@app.command("preview")
def preview(
    ctx: typer.Context,
    song: Annotated[str, typer.Argument(help="Song name (fuzzy) or song id")],
    output: OutputOption,
    difficulty: DifficultyOption = "ftr",
    by_id: ByIdOption = False,
) -> None:
    """Download a rendered chart preview."""
    query_type = SongQueryType.SONG_ID if by_id else SongQueryType.SONG_NAME
    parsed = _parse_difficulty(difficulty)
    data = run_with_client(ctx, lambda c: c.assets.preview(song, query_type, parsed))
    _write(output, data)


@app.command("aff")
def aff(
    ctx: typer.Context,
    song: Annotated[str, typer.Argument(help="Song id, or song name with --name")],
    output: OutputOption,
    difficulty: DifficultyOption = "ftr",
    by_name: Annotated[
        bool,
        typer.Option("--name", help="Treat SONG as a song name instead of an id"),
    ] = False,
) -> None:
    """Download a chart file (.aff)."""
    query_type = SongQueryType.SONG_NAME if by_name else SongQueryType.SONG_ID
    parsed = _parse_difficulty(difficulty)
    text = run_with_client(ctx, lambda c: c.assets.aff(song, query_type, parsed))
    _write(output, text.encode("utf-8"))
