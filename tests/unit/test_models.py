"""Unit tests for aua Pydantic models.

Tests cover:
- Enum coercion for difficulties and reply flags
- Option object validation
- Content models parsed from wire JSON samples
- All imports work correctly
"""

import pytest
from pydantic import ValidationError

from aua.models import (
    AccountInfo,
    AuaResponse,
    ChartInfo,
    Difficulty,
    PlayRecord,
    ReplyWith,
    SongQueryType,
    SongRandomContent,
    SongRandomOptions,
    UserBest30Options,
    UserBestOptions,
    UserInfoOptions,
    format_rating_bound,
)
from tests.conftest import account_info, chart_info, play_record, song_info


class TestDifficulty:
    """Tests for Difficulty.parse()."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (0, Difficulty.PAST),
            (3, Difficulty.BEYOND),
            ("1", Difficulty.PRESENT),
            ("ftr", Difficulty.FUTURE),
            ("BYD", Difficulty.BEYOND),
            ("future", Difficulty.FUTURE),
            (" Past ", Difficulty.PAST),
            (Difficulty.PRESENT, Difficulty.PRESENT),
        ],
    )
    def test_parse(self, value: object, expected: Difficulty) -> None:
        """Test parsing of ordinals and names."""
        assert Difficulty.parse(value) is expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [4, -1, "eternal", "", True])
    def test_parse_invalid(self, value: object) -> None:
        """Test that unknown difficulties are rejected."""
        with pytest.raises(ValueError):
            Difficulty.parse(value)  # type: ignore[arg-type]


class TestReplyWith:
    """Tests for ReplyWith flags."""

    def test_combination(self) -> None:
        """Test that flags combine as a bitset."""
        flags = ReplyWith.RECENT | ReplyWith.SONG_INFO
        assert flags & ReplyWith.RECENT
        assert flags & ReplyWith.SONG_INFO
        assert not ReplyWith.NONE & ReplyWith.RECENT

    def test_options_accept_int(self) -> None:
        """Test that option objects accept the integer form of the flags."""
        options = UserBest30Options(reply_with=3)
        assert options.reply_with == ReplyWith.RECENT | ReplyWith.SONG_INFO

    def test_options_reject_non_int(self) -> None:
        """Test that non-integer flags are rejected."""
        with pytest.raises(ValidationError):
            UserInfoOptions(reply_with="songinfo")


class TestSongRandomOptions:
    """Tests for song/random options."""

    def test_defaults(self) -> None:
        """Test the whole rating range by default."""
        options = SongRandomOptions()
        assert format_rating_bound(options.start) == "0"
        assert format_rating_bound(options.end) == "12"
        assert options.reply_with == ReplyWith.NONE

    @pytest.mark.parametrize(
        ("value", "expected"),
        [(9, "9"), (9.0, "9"), (9.5, "9.5"), ("9+", "9p"), ("10p", "10p"), ("11", "11")],
    )
    def test_bound_formatting(self, value: float | str, expected: str) -> None:
        """Test wire formatting of rating bounds."""
        options = SongRandomOptions(start=value)
        assert format_rating_bound(options.start) == expected

    @pytest.mark.parametrize(
        "value", ["nine", "9++", -1, True, "", float("nan"), float("inf")]
    )
    def test_invalid_bound(self, value: object) -> None:
        """Test that malformed bounds are rejected."""
        with pytest.raises(ValidationError):
            SongRandomOptions(start=value)

    def test_frozen(self) -> None:
        """Test that options are immutable."""
        options = SongRandomOptions()
        with pytest.raises(ValidationError):
            options.start = 5  # type: ignore[misc]


class TestUserOptions:
    """Tests for user endpoint options."""

    def test_best_parses_difficulty(self) -> None:
        """Test that difficulty accepts short names."""
        options = UserBestOptions(song="fractureray", difficulty="prs")
        assert options.difficulty is Difficulty.PRESENT

    def test_best_rejects_file_query(self) -> None:
        """Test that file name queries are rejected."""
        with pytest.raises(ValidationError):
            UserBestOptions(song="base.jpg", query_type=SongQueryType.FILE_NAME)

    def test_best_requires_song(self) -> None:
        """Test that an empty or blank song is rejected."""
        with pytest.raises(ValidationError):
            UserBestOptions(song="")
        with pytest.raises(ValidationError):
            UserBestOptions(song="   ")

    def test_best_strips_song(self) -> None:
        """Test that surrounding whitespace is not sent."""
        assert UserBestOptions(song=" Fracture Ray ").song == "Fracture Ray"

    def test_negative_counts_rejected(self) -> None:
        """Test that negative recent and overflow counts are rejected."""
        with pytest.raises(ValidationError):
            UserInfoOptions(recent=-1)
        with pytest.raises(ValidationError):
            UserBest30Options(overflow=-1)

    def test_counts_above_limit_rejected(self) -> None:
        """Test that recent is capped at 7 and overflow at 10."""
        assert UserInfoOptions(recent=7).recent == 7
        assert UserBest30Options(overflow=10).overflow == 10
        with pytest.raises(ValidationError):
            UserInfoOptions(recent=8)
        with pytest.raises(ValidationError):
            UserBest30Options(overflow=11)


class TestContentModels:
    """Tests for content models parsed from wire JSON."""

    def test_chart_info(self) -> None:
        """Test chart metadata parsing and the derived constant."""
        chart = ChartInfo.model_validate(chart_info(rating=113))
        assert chart.name_en == "Fracture Ray"
        assert chart.set == "vs"
        assert chart.constant == pytest.approx(11.3)

    def test_chart_info_ignores_unknown_fields(self) -> None:
        """Test that new server fields do not break parsing."""
        data = chart_info() | {"is_new_field": 1}
        assert ChartInfo.model_validate(data).note == 1549

    def test_account_hidden_potential(self) -> None:
        """Test that a negative rating means the potential is hidden."""
        account = AccountInfo.model_validate(account_info() | {"rating": -1})
        assert account.potential is None

    def test_play_record(self) -> None:
        """Test play record parsing."""
        record = PlayRecord.model_validate(play_record())
        assert record.song_id == "fractureray"
        assert record.shiny_perfect_count == 1400

    def test_random_content_accepts_both_song_info_keys(self) -> None:
        """Test that song info is read from either wire key."""
        for key in ("songinfo", "song_info"):
            content = SongRandomContent.model_validate(
                {"id": "x", "ratingClass": 1, key: song_info()}
            )
            assert content.song_info is not None

    def test_envelope_model(self) -> None:
        """Test the generic envelope with a typed payload."""
        envelope = AuaResponse[list[str]].model_validate(
            {"status": 0, "content": ["a", "b"]}
        )
        assert envelope.content == ["a", "b"]
        assert not envelope.is_error
        assert AuaResponse[list[str]].model_validate(
            {"status": -1, "message": "x"}
        ).is_error


class TestImports:
    """Tests that all imports work correctly."""

    def test_imports_from_package_root(self) -> None:
        """Test importing the public API from aua works."""
        from aua import (
            AuaAPIError,
            AuaClient,
            AuaMalformedResponseError,
            AuaTransportError,
            ClientConfig,
            QueryBuilder,
            __version__,
        )

        assert AuaClient is not None
        assert ClientConfig is not None
        assert QueryBuilder is not None
        assert AuaAPIError is not None
        assert AuaTransportError is not None
        assert AuaMalformedResponseError is not None
        assert __version__
