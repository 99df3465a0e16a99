"""Per-call option objects for endpoints with several optional arguments.

Each endpoint that accepts more than a couple of optional arguments takes a
single options model instead of a family of overloads. The models only check
that values have the right shape; the server owns semantic validation.
"""

import math
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from aua.models.enums import Difficulty, ReplyWith, SongQueryType

_RATING_BOUND_PATTERN = re.compile(r"^\d+(\.\d+)?[p+]?$")
_USERCODE_PATTERN = re.compile(r"^\d{9}$")


def _coerce_reply_with(value: Any) -> ReplyWith:
    if isinstance(value, ReplyWith):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"reply_with must be a ReplyWith flag, got {value!r}")
    return ReplyWith(value)


def format_rating_bound(value: float | int | str) -> str:
    """Format a rating range bound for ``song/random``.

    ``9+`` is sent as ``9p``; integral numbers drop their fractional part.
    """
    if isinstance(value, str):
        return value.strip().replace("+", "p")
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class SongRandomOptions(BaseModel):
    """Options for ``song/random``."""

    model_config = ConfigDict(frozen=True)

    start: float | str = Field(0, description="Lower rating bound, e.g. 9 or '9+'")
    end: float | str = Field(12, description="Upper rating bound")
    reply_with: ReplyWith = ReplyWith.NONE

    @field_validator("start", "end", mode="before")
    @classmethod
    def _check_bound(cls, value: Any) -> float | str:
        if isinstance(value, bool):
            raise ValueError("rating bound must be a number or a string like '9+'")
        if isinstance(value, (int, float)):
            if not math.isfinite(value):
                raise ValueError(f"rating bound must be finite, got {value!r}")
            if value < 0:
                raise ValueError("rating bound must not be negative")
            return float(value)
        if isinstance(value, str) and _RATING_BOUND_PATTERN.match(value.strip()):
            return value.strip()
        raise ValueError(f"Invalid rating bound: {value!r}")

    @field_validator("reply_with", mode="before")
    @classmethod
    def _check_reply_with(cls, value: Any) -> ReplyWith:
        return _coerce_reply_with(value)


class UserQuery(BaseModel):
    """Identifies a player by friend code or by name; exactly one is set."""

    model_config = ConfigDict(frozen=True)

    usercode: str | None = None
    user: str | None = None

    @model_validator(mode="after")
    def _check_exactly_one(self) -> "UserQuery":
        if bool(self.usercode) == bool(self.user):
            raise ValueError("Exactly one of usercode or user must be given")
        if self.usercode is not None and not _USERCODE_PATTERN.match(self.usercode):
            raise ValueError(f"usercode must be nine digits, got {self.usercode!r}")
        return self

    @classmethod
    def parse(cls, value: "UserQuery | str") -> "UserQuery":
        """Treat a nine digit string as a friend code and anything else as a name."""
        if isinstance(value, UserQuery):
            return value
        if not isinstance(value, str):
            raise ValueError(f"user must be a string or UserQuery, got {value!r}")
        value = value.strip()
        if _USERCODE_PATTERN.match(value):
            return cls(usercode=value)
        return cls(user=value)


class UserInfoOptions(BaseModel):
    """Options for ``user/info``."""

    model_config = ConfigDict(frozen=True)

    recent: int | None = Field(
        None,
        ge=0,
        le=7,
        description="Number of recent plays",
    )
    reply_with: ReplyWith = ReplyWith.NONE

    @field_validator("reply_with", mode="before")
    @classmethod
    def _check_reply_with(cls, value: Any) -> ReplyWith:
        return _coerce_reply_with(value)


class UserBestOptions(BaseModel):
    """Options for ``user/best``: which chart to look up."""

    model_config = ConfigDict(frozen=True)

    song: str = Field(min_length=1)
    query_type: SongQueryType = SongQueryType.SONG_NAME
    difficulty: Difficulty = Difficulty.FUTURE
    reply_with: ReplyWith = ReplyWith.NONE

    @field_validator("song")
    @classmethod
    def _check_song(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("song must be a non-empty string")
        return value

    @field_validator("difficulty", mode="before")
    @classmethod
    def _check_difficulty(cls, value: Any) -> Difficulty:
        return Difficulty.parse(value)

    @field_validator("query_type")
    @classmethod
    def _check_query_type(cls, value: SongQueryType) -> SongQueryType:
        if value is SongQueryType.FILE_NAME:
            raise ValueError("file name queries are only supported for song covers")
        return value

    @field_validator("reply_with", mode="before")
    @classmethod
    def _check_reply_with(cls, value: Any) -> ReplyWith:
        return _coerce_reply_with(value)


class UserBest30Options(BaseModel):
    """Options for ``user/best30``."""

    model_config = ConfigDict(frozen=True)

    overflow: int | None = Field(
        None,
        ge=0,
        le=10,
        description="Extra records past the 30th",
    )
    reply_with: ReplyWith = ReplyWith.NONE

    @field_validator("reply_with", mode="before")
    @classmethod
    def _check_reply_with(cls, value: Any) -> ReplyWith:
        return _coerce_reply_with(value)
