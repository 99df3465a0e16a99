"""High level entry point bundling every AUA endpoint group."""

from __future__ import annotations

from httpx import AsyncClient

from aua.client.assets_api import AssetsAPI
from aua.client.data_api import DataAPI
from aua.client.http_client import AuaHTTPClient
from aua.client.song_api import SongAPI
from aua.client.user_api import UserAPI
from aua.config import ClientConfig


class AuaClient:
    """Async client for the Arcaea Unlimited API.

    Endpoint groups are exposed as attributes and share one transport. Calls
    are independent and may be awaited concurrently.

    Example:
        config = ClientConfig(base_url="https://aua.example/v5", token="...")
        async with AuaClient(config) as client:
            info = await client.song.info("Fracture Ray")
            cover = await client.assets.song("fractureray", SongQueryType.SONG_ID)
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        *,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        http_client: AsyncClient | None = None,
    ):
        """Initialize the client.

        Args:
            config: Connection settings. When omitted, ``base_url`` is required
                and the remaining keyword arguments fill a new ClientConfig.
            base_url: Overrides ``config.base_url``.
            token: Overrides ``config.token``.
            timeout: Overrides ``config.timeout``.
            http_client: Externally owned httpx client to send requests with.
        """
        overrides = {
            key: value
            for key, value in (
                ("base_url", base_url),
                ("token", token),
                ("timeout", timeout),
            )
            if value is not None
        }
        if config is None:
            config = ClientConfig.model_validate(overrides)
        elif overrides:
            config = ClientConfig.model_validate(config.model_dump() | overrides)

        self.config = config
        self.http = AuaHTTPClient(config, client=http_client)
        self.song = SongAPI(self.http)
        self.user = UserAPI(self.http)
        self.assets = AssetsAPI(self.http)
        self.data = DataAPI(self.http)

    async def __aenter__(self) -> AuaClient:
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.close()

    async def connect(self) -> None:
        """Open the underlying transport."""
        await self.http.connect()

    async def close(self) -> None:
        """Close the underlying transport."""
        await self.http.close()
