"""Shared fixtures and utilities for aua tests.

This module provides:
- `FakeAUAServer`, an httpx MockTransport handler that records requests
- Envelope response builders for JSON endpoints
- The `requires_server` decorator to skip live tests when no server is configured
- Custom markers for test categorization
"""

import json
import os
from typing import Any

import httpx
import pytest

from aua.client import AuaClient
from aua.config import ClientConfig

BASE_URL = "https://aua.test/v5"

# Live server settings, only used by tests marked with requires_server
LIVE_BASE_URL = os.environ.get("AUA_BASE_URL")
LIVE_TOKEN = os.environ.get("AUA_TOKEN")


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests requiring server"
    )


requires_server = pytest.mark.skipif(
    not LIVE_BASE_URL,
    reason="Integration test requires AUA_BASE_URL pointing at a running AUA server",
)


def envelope_response(
    content: Any = None,
    *,
    status: int = 0,
    message: str | None = None,
    status_code: int = 200,
) -> httpx.Response:
    """Build a JSON envelope response.

    Keys whose value is None are left out of the body.
    """
    body: dict[str, Any] = {"status": status}
    if message is not None:
        body["message"] = message
    if content is not None:
        body["content"] = content
    return httpx.Response(status_code, content=json.dumps(body).encode("utf-8"))


def error_response(status: int, message: str, status_code: int = 200) -> httpx.Response:
    """Build a failure envelope response."""
    return envelope_response(status=status, message=message, status_code=status_code)


class FakeAUAServer:
    """MockTransport handler replying with a fixed response.

    Every request is recorded so tests can assert on the path and query.
    """

    def __init__(self, response: httpx.Response | Exception):
        self.response = response
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if isinstance(self.response, Exception):
            raise self.response
        # Fresh copy so the same reply can serve several requests
        return httpx.Response(
            self.response.status_code,
            headers=self.response.headers,
            content=self.response.content,
        )

    @property
    def last_request(self) -> httpx.Request:
        assert self.requests, "no request was sent"
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        return self.last_request.url.path

    @property
    def last_params(self) -> list[tuple[str, str]]:
        return list(self.last_request.url.params.multi_items())

    def client(self, config: ClientConfig | None = None) -> AuaClient:
        """Create an AuaClient sending its requests to this fake server."""
        config = config or ClientConfig(base_url=BASE_URL, token="test-token")
        http_client = httpx.AsyncClient(
            base_url=config.base_url + "/",
            headers=config.headers(),
            transport=httpx.MockTransport(self),
        )
        return AuaClient(config, http_client=http_client)


@pytest.fixture
def client_config() -> ClientConfig:
    """Provide a client configuration pointing at the fake server."""
    return ClientConfig(base_url=BASE_URL, token="test-token")


def chart_info(
    difficulty: int = 2,
    rating: int = 110,
    name_en: str = "Fracture Ray",
) -> dict[str, Any]:
    """Chart metadata in wire format."""
    return {
        "name_en": name_en,
        "name_jp": "",
        "artist": "Sakuzyo",
        "bpm": "200",
        "bpm_base": 200.0,
        "set": "vs",
        "set_friendly": "Black Fate",
        "time": 144,
        "side": 1,
        "world_unlock": False,
        "remote_download": True,
        "bg": "",
        "date": 1509667201,
        "version": "1.5",
        "difficulty": difficulty,
        "rating": rating,
        "note": 1549,
        "chart_designer": "Nitro",
        "jacket_designer": "",
        "jacket_override": False,
        "audio_override": False,
    }


def song_info(song_id: str = "fractureray") -> dict[str, Any]:
    """Song info content in wire format."""
    return {
        "song_id": song_id,
        "difficulties": [chart_info(d, 40 + d * 25) for d in range(3)],
        "alias": ["fr", "骨折光"],
    }


def account_info() -> dict[str, Any]:
    """Account info in wire format."""
    return {
        "code": "000000001",
        "name": "Hikari",
        "user_id": 1,
        "is_mutual": False,
        "is_char_uncapped_override": False,
        "is_char_uncapped": True,
        "is_skill_sealed": False,
        "rating": 1250,
        "join_date": 1487940000000,
        "character": 5,
    }


def play_record(song_id: str = "fractureray", difficulty: int = 2) -> dict[str, Any]:
    """Play record in wire format."""
    return {
        "score": 9950000,
        "health": 100,
        "rating": 12.75,
        "song_id": song_id,
        "modifier": 0,
        "difficulty": difficulty,
        "clear_type": 1,
        "best_clear_type": 3,
        "time_played": 1650000000000,
        "near_count": 10,
        "miss_count": 2,
        "perfect_count": 1537,
        "shiny_perfect_count": 1400,
    }
