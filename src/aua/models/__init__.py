"""Pydantic models for the Arcaea Unlimited API.

This package provides the response envelope, the content models of each
endpoint and the option objects accepted by the endpoint callers.

Usage:
    from aua.models import Difficulty, ReplyWith, SongQueryType
    from aua.models import SongInfoContent, UserBest30Content
"""

from aua.models.data import UpdateContent
from aua.models.enums import Difficulty, ReplyWith, SongQueryType
from aua.models.envelope import AuaResponse, RawAuaResponse
from aua.models.requests import (
    SongRandomOptions,
    UserBest30Options,
    UserBestOptions,
    UserInfoOptions,
    UserQuery,
    format_rating_bound,
)
from aua.models.song import (
    ChartInfo,
    SongInfoContent,
    SongListContent,
    SongRandomContent,
)
from aua.models.user import (
    AccountInfo,
    PlayRecord,
    UserBest30Content,
    UserBestContent,
    UserInfoContent,
)

__all__ = [
    # Enums
    "Difficulty",
    "ReplyWith",
    "SongQueryType",
    # Envelope
    "AuaResponse",
    "RawAuaResponse",
    # Song
    "ChartInfo",
    "SongInfoContent",
    "SongListContent",
    "SongRandomContent",
    # User
    "AccountInfo",
    "PlayRecord",
    "UserInfoContent",
    "UserBestContent",
    "UserBest30Content",
    # Data
    "UpdateContent",
    # Requests
    "SongRandomOptions",
    "UserQuery",
    "UserInfoOptions",
    "UserBestOptions",
    "UserBest30Options",
    "format_rating_bound",
]
