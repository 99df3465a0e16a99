"""HTTP client module for the Arcaea Unlimited API.

This module provides the async client, its endpoint groups, the query string
builder, the envelope decoder and the client exception hierarchy.

Usage:
    from aua.client import AuaClient, AuaAPIError, AuaTransportError

    async with AuaClient(base_url="https://aua.example/v5", token="...") as client:
        info = await client.song.info("Fracture Ray")
        icon = await client.assets.icon(0, awakened=True)
"""

from aua.client.assets_api import AssetsAPI
from aua.client.aua_client import AuaClient
from aua.client.data_api import DataAPI
from aua.client.envelope import decode_envelope, parse_envelope, unwrap_envelope
from aua.client.exceptions import (
    AuaAPIError,
    AuaClientError,
    AuaMalformedResponseError,
    AuaTransportError,
)
from aua.client.http_client import AuaHTTPClient
from aua.client.query import QueryBuilder, format_query_value
from aua.client.song_api import SongAPI
from aua.client.user_api import UserAPI

__all__ = [
    "AuaClient",
    "AuaHTTPClient",
    "SongAPI",
    "UserAPI",
    "AssetsAPI",
    "DataAPI",
    "QueryBuilder",
    "format_query_value",
    "decode_envelope",
    "parse_envelope",
    "unwrap_envelope",
    "AuaClientError",
    "AuaAPIError",
    "AuaTransportError",
    "AuaMalformedResponseError",
]
