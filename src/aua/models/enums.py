"""Enumerations shared by AUA requests and responses."""

from enum import Enum, IntEnum, IntFlag


class SongQueryType(str, Enum):
    """How a song argument should be interpreted by the server.

    The value is the query parameter name the server expects.
    """

    SONG_NAME = "songname"  # fuzzy match on title or alias
    SONG_ID = "songid"  # sid from the Arcaea songlist
    FILE_NAME = "file"  # cover file name, assets/song only


class Difficulty(IntEnum):
    """Chart difficulty, sent as its ordinal."""

    PAST = 0
    PRESENT = 1
    FUTURE = 2
    BEYOND = 3

    @classmethod
    def parse(cls, value: "Difficulty | int | str") -> "Difficulty":
        """Coerce an ordinal, full name or short name (pst/prs/ftr/byd)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid difficulty: {value!r}")
        if isinstance(value, int):
            return cls(value)
        text = value.strip().lower()
        if text.isdigit():
            return cls(int(text))
        if text in _DIFFICULTY_SHORT_NAMES:
            return _DIFFICULTY_SHORT_NAMES[text]
        try:
            return cls[text.upper()]
        except KeyError:
            raise ValueError(f"Invalid difficulty: {value!r}") from None


_DIFFICULTY_SHORT_NAMES = {
    "pst": Difficulty.PAST,
    "prs": Difficulty.PRESENT,
    "ftr": Difficulty.FUTURE,
    "byd": Difficulty.BEYOND,
    "byn": Difficulty.BEYOND,
}


class ReplyWith(IntFlag):
    """Additional information the server should include in a reply."""

    NONE = 0
    RECENT = 1
    SONG_INFO = 2
