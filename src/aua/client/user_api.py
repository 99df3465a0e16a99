"""Endpoint callers for ``user/*``."""

from __future__ import annotations

from aua.client.http_client import AuaHTTPClient
from aua.client.query import QueryBuilder, song_query_key
from aua.models import (
    ReplyWith,
    UserBest30Content,
    UserBest30Options,
    UserBestContent,
    UserBestOptions,
    UserInfoContent,
    UserInfoOptions,
    UserQuery,
)


def _user_query(user: UserQuery | str) -> QueryBuilder:
    user = UserQuery.parse(user)
    return QueryBuilder().add("usercode", user.usercode).add("user", user.user)


def _add_reply_with(query: QueryBuilder, reply_with: ReplyWith) -> QueryBuilder:
    if reply_with & ReplyWith.RECENT:
        query.add("withrecent", True)
    if reply_with & ReplyWith.SONG_INFO:
        query.add("withsonginfo", True)
    return query


class UserAPI:
    """Player profile and score lookups.

    ``user`` arguments accept a ``UserQuery`` or a plain string; a nine digit
    string is sent as a friend code and anything else as a player name.
    """

    def __init__(self, http: AuaHTTPClient):
        self._http = http

    async def info(
        self,
        user: UserQuery | str,
        options: UserInfoOptions | None = None,
    ) -> UserInfoContent:
        """Get a player's profile and recent plays."""
        options = options or UserInfoOptions()
        query = _user_query(user).add("recent", options.recent)
        # user/info only understands the song info flag
        if options.reply_with & ReplyWith.SONG_INFO:
            query.add("withsonginfo", True)
        return await self._http.get_content("user/info", query.build(), UserInfoContent)

    async def best(
        self,
        user: UserQuery | str,
        options: UserBestOptions,
    ) -> UserBestContent:
        """Get a player's best score on one chart."""
        query = (
            _user_query(user)
            .add(song_query_key(options.query_type), options.song)
            .add("difficulty", options.difficulty)
        )
        _add_reply_with(query, options.reply_with)
        return await self._http.get_content("user/best", query.build(), UserBestContent)

    async def best30(
        self,
        user: UserQuery | str,
        options: UserBest30Options | None = None,
    ) -> UserBest30Content:
        """Get a player's best 30 plays and potential averages.

        This endpoint is slow on the server side; expect long response times.
        """
        options = options or UserBest30Options()
        query = _user_query(user).add("overflow", options.overflow)
        _add_reply_with(query, options.reply_with)
        return await self._http.get_content(
            "user/best30", query.build(), UserBest30Content
        )
