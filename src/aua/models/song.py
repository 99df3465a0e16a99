"""Song content models returned by the ``song/*`` endpoints."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ChartInfo(BaseModel):
    """Metadata of a single chart (one difficulty of a song)."""

    model_config = ConfigDict(populate_by_name=True)

    name_en: str
    name_jp: str = ""
    artist: str = ""
    bpm: str = ""
    bpm_base: float = 0.0
    set: str = ""
    set_friendly: str = ""
    time: int = 0
    side: int = 0
    world_unlock: bool = False
    remote_download: bool = False
    bg: str = ""
    date: int = 0
    version: str = ""
    difficulty: int = 0
    rating: int = 0
    note: int = 0
    chart_designer: str = ""
    jacket_designer: str = ""
    jacket_override: bool = False
    audio_override: bool = False

    @property
    def constant(self) -> float:
        """Chart constant; the server reports rating multiplied by ten."""
        return self.rating / 10


class SongInfoContent(BaseModel):
    """Response content of ``song/info``."""

    model_config = ConfigDict(populate_by_name=True)

    song_id: str
    difficulties: list[ChartInfo]
    alias: list[str] = Field(default_factory=list)

    def chart(self, difficulty: int) -> ChartInfo | None:
        """Return the chart for a difficulty ordinal, if the song has one."""
        for chart in self.difficulties:
            if chart.difficulty == difficulty:
                return chart
        return None


class SongRandomContent(BaseModel):
    """Response content of ``song/random``."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    rating_class: int = Field(alias="ratingClass")
    song_info: SongInfoContent | None = Field(
        default=None,
        validation_alias=AliasChoices("song_info", "songinfo"),
    )


class SongListContent(BaseModel):
    """Response content of ``song/list``."""

    model_config = ConfigDict(populate_by_name=True)

    songs: list[SongInfoContent]
