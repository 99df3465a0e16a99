"""Query string construction for AUA GET requests.

Every AUA endpoint takes its arguments as optional query parameters. This
module turns an ordered set of (name, value) pairs into the query suffix that
is appended to the endpoint path, skipping parameters that were not supplied.
"""

from __future__ import annotations

from enum import Enum
from urllib.parse import quote

from aua.models.enums import SongQueryType

QueryValue = str | int | float | bool | Enum | None


def format_query_value(value: QueryValue) -> str | None:
    """Convert a parameter value to its wire string.

    Returns None for values that should be omitted (None and empty string).
    Booleans become ``true``/``false``, enums contribute their value and
    integral floats drop the trailing ``.0`` (``12.0`` -> ``"12"``).
    """
    if value is None:
        return None
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return str(int(value)) if value.is_integer() else repr(value)
    text = str(value)
    return text or None


class QueryBuilder:
    """Builder for a URL query suffix.

    Pairs are kept in insertion order and repeated names are preserved.

    Example:
        >>> QueryBuilder().add("songname", "fre").add("difficulty", 2).build()
        '?songname=fre&difficulty=2'
    """

    def __init__(self) -> None:
        self._pairs: list[tuple[str, str]] = []

    def add(self, name: str, value: QueryValue) -> QueryBuilder:
        """Append a parameter unless its value is None or empty."""
        text = format_query_value(value)
        if text is not None:
            self._pairs.append((name, text))
        return self

    def build(self) -> str:
        """Return ``""`` when empty, otherwise ``?`` followed by the encoded pairs."""
        if not self._pairs:
            return ""
        return "?" + "&".join(
            f"{quote(name, safe='')}={quote(value, safe='')}"
            for name, value in self._pairs
        )

    def __len__(self) -> int:
        return len(self._pairs)


def song_query_key(query_type: SongQueryType) -> str:
    """Query parameter naming a song for the song and user endpoints."""
    if query_type is SongQueryType.FILE_NAME:
        raise ValueError("file name queries are only supported for song covers")
    return query_type.value


def require_text(value: str, name: str) -> str:
    """Return ``value`` stripped, rejecting non-strings and blank strings."""
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{name} must be a non-empty string")
    return value.strip()
