"""Endpoint callers for ``assets/*``.

Asset endpoints return the file itself rather than an envelope, so a failed
lookup only shows up as a non-2xx status (raised as AuaTransportError).
"""

from __future__ import annotations

from aua.client.http_client import AuaHTTPClient
from aua.client.query import QueryBuilder, require_text, song_query_key
from aua.models import Difficulty, SongQueryType


def _partner_query(partner: int, awakened: bool) -> QueryBuilder:
    if isinstance(partner, bool) or not isinstance(partner, int) or partner < 0:
        raise ValueError(f"partner must be a non-negative integer, got {partner!r}")
    if not isinstance(awakened, bool):
        raise ValueError(f"awakened must be a bool, got {awakened!r}")
    return QueryBuilder().add("partner", partner).add("awakened", awakened)


class AssetsAPI:
    """Images, chart previews and chart files."""

    def __init__(self, http: AuaHTTPClient):
        self._http = http

    async def icon(self, partner: int, awakened: bool = False) -> bytes:
        """Get a partner icon as PNG bytes."""
        query = _partner_query(partner, awakened)
        return await self._http.get_bytes("assets/icon", query.build())

    async def char(self, partner: int, awakened: bool = False) -> bytes:
        """Get a partner's full character art as PNG bytes."""
        query = _partner_query(partner, awakened)
        return await self._http.get_bytes("assets/char", query.build())

    async def song(
        self,
        song: str,
        query_type: SongQueryType = SongQueryType.SONG_NAME,
        difficulty: Difficulty | int | str = Difficulty.FUTURE,
    ) -> bytes:
        """Get a song cover.

        Args:
            song: Song name for fuzzy querying, sid, or cover file name.
            query_type: How ``song`` should be interpreted.
            difficulty: Difficulty whose cover to return. Ignored for file
                name queries, which already name a specific cover.
        """
        query = QueryBuilder().add(query_type.value, require_text(song, "song"))
        if query_type is not SongQueryType.FILE_NAME:
            query.add("difficulty", Difficulty.parse(difficulty))
        return await self._http.get_bytes("assets/song", query.build())

    async def preview(
        self,
        song: str,
        query_type: SongQueryType = SongQueryType.SONG_NAME,
        difficulty: Difficulty | int | str = Difficulty.FUTURE,
    ) -> bytes:
        """Get a rendered chart preview image.

        Not every AUA deployment serves previews; those answer with 404.
        """
        query = (
            QueryBuilder()
            .add(song_query_key(query_type), require_text(song, "song"))
            .add("difficulty", Difficulty.parse(difficulty))
        )
        return await self._http.get_bytes("assets/preview", query.build())

    async def aff(
        self,
        song: str,
        query_type: SongQueryType = SongQueryType.SONG_ID,
        difficulty: Difficulty | int | str = Difficulty.FUTURE,
    ) -> str:
        """Get the chart file (``.aff``) of a song as text."""
        query = (
            QueryBuilder()
            .add(song_query_key(query_type), require_text(song, "song"))
            .add("difficulty", Difficulty.parse(difficulty))
        )
        return await self._http.get_text("assets/aff", query.build())
