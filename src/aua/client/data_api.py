"""Endpoint callers for ``data/*``."""

from __future__ import annotations

from aua.client.http_client import AuaHTTPClient
from aua.models import UpdateContent


class DataAPI:
    """Miscellaneous service data."""

    def __init__(self, http: AuaHTTPClient):
        self._http = http

    async def update(self) -> UpdateContent:
        """Get the download URL and version of the latest game package."""
        return await self._http.get_content("data/update", "", UpdateContent)
