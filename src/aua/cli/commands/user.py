"""User subcommands for player profiles and scores."""

from __future__ import annotations

from typing import Annotated

import typer

from aua.cli.utils.client import run_with_client
from aua.cli.utils.output import (
    console,
    create_account_panel,
    create_best30_panel,
    create_record_table,
)
from aua.models import (
    Difficulty,
    ReplyWith,
    SongQueryType,
    UserBest30Options,
    UserBestOptions,
    UserInfoOptions,
)

app = typer.Typer(no_args_is_help=True)

UserArgument = Annotated[
    str,
    typer.Argument(help="Nine digit friend code or player name"),
]
WithSongInfoOption = Annotated[
    bool,
    typer.Option("--with-song-info", help="Include song titles"),
]
WithRecentOption = Annotated[
    bool,
    typer.Option("--with-recent", help="Include the most recent play"),
]


def _reply_with(recent: bool, song_info: bool) -> ReplyWith:
    flags = ReplyWith.NONE
    if recent:
        flags |= ReplyWith.RECENT
    if song_info:
        flags |= ReplyWith.SONG_INFO
    return flags


@app.command("info")
def info(
    ctx: typer.Context,
    user: UserArgument,
    recent: Annotated[
        int | None,
        typer.Option("--recent", "-r", help="Number of recent plays to show (0-7)"),
    ] = None,
    with_song_info: WithSongInfoOption = False,
) -> None:
    """Show a player's profile and recent plays."""

    async def _call(client):
        options = UserInfoOptions(
            recent=recent,
            reply_with=_reply_with(False, with_song_info),
        )
        return await client.user.info(user, options)

    content = run_with_client(ctx, _call)
    console.print(create_account_panel(content.account_info))
    if content.recent_score:
        console.print(
            create_record_table(content.recent_score, "Recent", content.songinfo)
        )


@app.command("best")
def best(
    ctx: typer.Context,
    user: UserArgument,
    song: Annotated[str, typer.Argument(help="Song name (fuzzy) or song id")],
    difficulty: Annotated[
        str,
        typer.Option("--difficulty", "-d", help="pst/prs/ftr/byd or 0-3"),
    ] = "ftr",
    by_id: Annotated[
        bool,
        typer.Option("--id", help="Treat SONG as a song id instead of a name"),
    ] = False,
    with_recent: WithRecentOption = False,
    with_song_info: WithSongInfoOption = False,
) -> None:
    """Show a player's best score on one chart.

    Examples:
        aua user best 000000001 "Fracture Ray" -d byd
    """

    async def _call(client):
        options = UserBestOptions(
            song=song,
            query_type=SongQueryType.SONG_ID if by_id else SongQueryType.SONG_NAME,
            difficulty=Difficulty.parse(difficulty),
            reply_with=_reply_with(with_recent, with_song_info),
        )
        return await client.user.best(user, options)

    content = run_with_client(ctx, _call)
    console.print(create_account_panel(content.account_info))
    console.print(create_record_table([content.record], "Best", content.songinfo))


@app.command("best30")
def best30(
    ctx: typer.Context,
    user: UserArgument,
    overflow: Annotated[
        int | None,
        typer.Option("--overflow", "-o", help="Extra records past the 30th (0-10)"),
    ] = None,
    with_recent: WithRecentOption = False,
    with_song_info: WithSongInfoOption = False,
) -> None:
    """Show a player's best 30 plays."""

    async def _call(client):
        options = UserBest30Options(
            overflow=overflow,
            reply_with=_reply_with(with_recent, with_song_info),
        )
        return await client.user.best30(user, options)

    content = run_with_client(ctx, _call)
    console.print(create_best30_panel(content))
    console.print(
        create_record_table(content.best30_list, "Best 30", content.best30_songinfo)
    )
    if content.best30_overflow:
        console.print(
            create_record_table(
                content.best30_overflow, "Overflow", content.best30_overflow_songinfo
            )
        )
