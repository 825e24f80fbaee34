"""Shared pytest fixtures for the search core tests."""

from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from okashi.config import ApiSettings

Handler = Callable[[httpx.Request], httpx.Response]


def make_item(
    name: str | None = "A",
    maker: str | None = "M",
    url: str | None = "http://x",
    image: str | None = "http://y",
) -> dict[str, Any]:
    return {"name": name, "maker": maker, "url": url, "image": image}


def payload_bytes(items: list[dict[str, Any]] | None) -> bytes:
    return json.dumps({"item": items}, ensure_ascii=False).encode("utf-8")


@pytest.fixture
def api_settings() -> ApiSettings:
    return ApiSettings()


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def mock_client_factory(recorded_requests):
    """Build an ``httpx.AsyncClient`` whose requests are answered by ``handler``."""

    def factory(handler: Handler) -> httpx.AsyncClient:
        async def _dispatch(request: httpx.Request) -> httpx.Response:
            recorded_requests.append(request)
            return handler(request)

        return httpx.AsyncClient(transport=httpx.MockTransport(_dispatch))

    return factory
