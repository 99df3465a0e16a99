"""Endpoint callers for ``song/*``."""

from __future__ import annotations

from aua.client.http_client import AuaHTTPClient
from aua.client.query import QueryBuilder, require_text, song_query_key
from aua.models import (
    ReplyWith,
    SongInfoContent,
    SongListContent,
    SongQueryType,
    SongRandomContent,
    SongRandomOptions,
    format_rating_bound,
)


class SongAPI:
    """Song metadata lookups."""

    def __init__(self, http: AuaHTTPClient):
        self._http = http

    async def info(
        self,
        songname: str,
        query_type: SongQueryType = SongQueryType.SONG_NAME,
    ) -> SongInfoContent:
        """Get information of a song.

        Args:
            songname: Any song name for fuzzy querying, or the sid.
            query_type: Whether ``songname`` is a name or a sid.

        Returns:
            Song information with every difficulty.
        """
        query = QueryBuilder().add(
            song_query_key(query_type), require_text(songname, "songname")
        )
        return await self._http.get_content("song/info", query.build(), SongInfoContent)

    async def alias(
        self,
        songname: str,
        query_type: SongQueryType = SongQueryType.SONG_NAME,
    ) -> list[str]:
        """Get the aliases of a song."""
        query = QueryBuilder().add(
            song_query_key(query_type), require_text(songname, "songname")
        )
        return await self._http.get_content("song/alias", query.build(), list[str])

    async def random(self, options: SongRandomOptions | None = None) -> SongRandomContent:
        """Pick a random chart within a rating range.

        Args:
            options: Rating bounds (``9+`` style strings allowed) and whether
                to include song info. Defaults to the whole range 0 to 12.
        """
        options = options or SongRandomOptions()
        query = (
            QueryBuilder()
            .add("start", format_rating_bound(options.start))
            .add("end", format_rating_bound(options.end))
        )
        if options.reply_with & ReplyWith.SONG_INFO:
            query.add("withsonginfo", True)
        return await self._http.get_content(
            "song/random", query.build(), SongRandomContent
        )

    async def list(self) -> SongListContent:
        """Get the whole song list.

        This is a large payload; avoid calling it frequently.
        """
        return await self._http.get_content("song/list", "", SongListContent)
