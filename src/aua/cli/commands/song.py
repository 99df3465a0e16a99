"""Song subcommands for looking up song metadata."""

from __future__ import annotations

from typing import Annotated

import typer

from aua.cli.utils.client import run_with_client
from aua.cli.utils.output import (
    console,
    create_chart_panel,
    create_song_table,
    format_difficulty,
    print_warning,
)
from aua.models import ReplyWith, SongQueryType, SongRandomOptions

app = typer.Typer(no_args_is_help=True)

SongArgument = Annotated[str, typer.Argument(help="Song name (fuzzy) or song id")]
ByIdOption = Annotated[
    bool,
    typer.Option("--id", help="Treat SONG as a song id instead of a name"),
]


def _query_type(by_id: bool) -> SongQueryType:
    return SongQueryType.SONG_ID if by_id else SongQueryType.SONG_NAME


@app.command("info")
def info(ctx: typer.Context, song: SongArgument, by_id: ByIdOption = False) -> None:
    """Show every chart of a song.

    Examples:
        aua song info "Fracture Ray"
        aua song info fractureray --id
    """
    content = run_with_client(ctx, lambda c: c.song.info(song, _query_type(by_id)))
    console.print(create_song_table([content]))
    if content.alias:
        console.print(f"[bold]Aliases:[/bold] {', '.join(content.alias)}")


@app.command("alias")
def alias(ctx: typer.Context, song: SongArgument, by_id: ByIdOption = False) -> None:
    """List the aliases of a song."""
    aliases = run_with_client(ctx, lambda c: c.song.alias(song, _query_type(by_id)))
    if not aliases:
        print_warning("No aliases found")
        return
    for name in aliases:
        console.print(name)


@app.command("random")
def random(
    ctx: typer.Context,
    start: Annotated[
        str,
        typer.Option("--start", "-s", help="Lower rating bound, e.g. 9 or 9+"),
    ] = "0",
    end: Annotated[
        str,
        typer.Option("--end", "-e", help="Upper rating bound"),
    ] = "12",
    with_song_info: Annotated[
        bool,
        typer.Option("--with-song-info", help="Include the picked song's metadata"),
    ] = False,
) -> None:
    """Pick a random chart within a rating range.

    Examples:
        aua song random --start 9+ --end 10
    """

    async def _call(client):
        options = SongRandomOptions(
            start=start,
            end=end,
            reply_with=ReplyWith.SONG_INFO if with_song_info else ReplyWith.NONE,
        )
        return await client.song.random(options)

    content = run_with_client(ctx, _call)
    console.print(
        f"[bold cyan]{content.id}[/bold cyan] "
        f"[magenta]{format_difficulty(content.rating_class)}[/magenta]"
    )
    if content.song_info is not None:
        chart = content.song_info.chart(content.rating_class)
        if chart is not None:
            console.print(create_chart_panel(content.song_info.song_id, chart))


@app.command("list")
def list_songs(
    ctx: typer.Context,
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-n", help="Only show the first N songs"),
    ] = None,
) -> None:
    """List every song known to the server."""
    content = run_with_client(ctx, lambda c: c.song.list())
    songs = content.songs if limit is None else content.songs[:limit]
    console.print(create_song_table(songs))
    console.print(f"{len(content.songs)} songs")
