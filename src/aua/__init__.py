"""Typed async client for the Arcaea Unlimited API.

Usage:
    from aua import AuaClient, ClientConfig, Difficulty

    async with AuaClient(ClientConfig(base_url="https://aua.example/v5")) as client:
        best = await client.user.best30("000000001")
"""

__version__ = "0.1.0"

from aua.client import (  # noqa: E402
    AuaAPIError,
    AuaClient,
    AuaClientError,
    AuaMalformedResponseError,
    AuaTransportError,
    QueryBuilder,
    decode_envelope,
)
from aua.config import ClientConfig  # noqa: E402
from aua.models import (  # noqa: E402
    Difficulty,
    ReplyWith,
    SongQueryType,
    SongRandomOptions,
    UserBest30Options,
    UserBestOptions,
    UserInfoOptions,
    UserQuery,
)

__all__ = [
    "__version__",
    "AuaClient",
    "ClientConfig",
    "QueryBuilder",
    "decode_envelope",
    "AuaClientError",
    "AuaAPIError",
    "AuaTransportError",
    "AuaMalformedResponseError",
    "Difficulty",
    "ReplyWith",
    "SongQueryType",
    "SongRandomOptions",
    "UserQuery",
    "UserInfoOptions",
    "UserBestOptions",
    "UserBest30Options",
]
