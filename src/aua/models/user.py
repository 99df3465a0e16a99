"""User content models returned by the ``user/*`` endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from aua.models.song import ChartInfo


class AccountInfo(BaseModel):
    """Public profile of an Arcaea account."""

    model_config = ConfigDict(populate_by_name=True)

    code: str
    name: str
    user_id: int | None = None
    is_mutual: bool = False
    is_char_uncapped_override: bool = False
    is_char_uncapped: bool = False
    is_skill_sealed: bool = False
    rating: int = -1  # -1 when the player hides their potential
    join_date: int | None = None
    character: int | None = None

    @property
    def potential(self) -> float | None:
        """Potential as displayed in game, or None when hidden."""
        if self.rating < 0:
            return None
        return self.rating / 100


class PlayRecord(BaseModel):
    """A single play result."""

    model_config = ConfigDict(populate_by_name=True)

    song_id: str
    difficulty: int
    score: int
    rating: float = 0.0
    health: int | None = None
    modifier: int | None = None
    clear_type: int | None = None
    best_clear_type: int | None = None
    time_played: int | None = None
    shiny_perfect_count: int = 0
    perfect_count: int = 0
    near_count: int = 0
    miss_count: int = 0


class UserInfoContent(BaseModel):
    """Response content of ``user/info``."""

    model_config = ConfigDict(populate_by_name=True)

    account_info: AccountInfo
    recent_score: list[PlayRecord] = Field(default_factory=list)
    songinfo: list[ChartInfo] = Field(default_factory=list)


class UserBestContent(BaseModel):
    """Response content of ``user/best``."""

    model_config = ConfigDict(populate_by_name=True)

    account_info: AccountInfo
    record: PlayRecord
    songinfo: list[ChartInfo] = Field(default_factory=list)
    recent_score: PlayRecord | None = None
    recent_songinfo: ChartInfo | None = None


class UserBest30Content(BaseModel):
    """Response content of ``user/best30``."""

    model_config = ConfigDict(populate_by_name=True)

    best30_avg: float
    recent10_avg: float
    account_info: AccountInfo
    best30_list: list[PlayRecord]
    best30_overflow: list[PlayRecord] = Field(default_factory=list)
    best30_songinfo: list[ChartInfo] = Field(default_factory=list)
    best30_overflow_songinfo: list[ChartInfo] = Field(default_factory=list)
    recent_score: PlayRecord | None = None
    recent_songinfo: ChartInfo | None = None
