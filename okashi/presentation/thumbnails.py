"""Thumbnail fetching for result rows."""

from __future__ import annotations

import asyncio
from typing import Iterable

import httpx

from okashi.config import ApiSettings
from okashi.domain.models import SearchRecord
from okashi.logging import logger


class ThumbnailLoader:
    """Fetch image bytes for records; failures are reported as ``None``."""

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ApiSettings | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ApiSettings()

    async def fetch(self, url: str) -> bytes | None:
        try:
            response = await self._client.get(
                url,
                timeout=self._settings.request_timeout_seconds,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "thumbnail_fetch_failed",
                url=url,
                status_code=exc.response.status_code,
            )
            return None
        except (httpx.RequestError, httpx.InvalidURL) as exc:
            logger.warning("thumbnail_fetch_failed", url=url, error=str(exc))
            return None
        return response.content

    async def fetch_many(self, records: Iterable[SearchRecord]) -> list[bytes | None]:
        return list(await asyncio.gather(*(self.fetch(record.image) for record in records)))


__all__ = ["ThumbnailLoader"]
